"""Helpers for names tagged as ``[prefix]{suffix}``."""


def _between(target: str, opening: str, closing: str) -> str:
    begin = target.find(opening) + 1
    end = target.find(closing)
    if end < begin:
        return target[begin:]
    return target[begin:end]


def get_prefix(target: str) -> str:
    """Return the text between the first ``[`` and the first ``]``."""
    return _between(target, "[", "]")


def get_suffix(target: str) -> str:
    """Return the text between the first ``{`` and the first ``}``."""
    return _between(target, "{", "}")


def contains_prefix(target: str, prefix: str) -> bool:
    """Tell whether ``[prefix]`` occurs in the target."""
    return f"[{prefix}]" in target


def contains_suffix(target: str, suffix: str) -> bool:
    """Tell whether the suffix occurs in square brackets in the target."""
    return f"[{suffix}]" in target


def make_tag(prefix: str, suffix: str) -> str:
    """Build a ``[prefix]{suffix}`` tag."""
    return f"[{prefix}]{{{suffix}}}"