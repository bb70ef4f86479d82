"""Persistent story flags, with ``!`` marking a negated check."""

from dataclasses import dataclass, field


def is_negative(flag: str) -> bool:
    """Tell whether a flag is a negated one (starts with ``!``)."""
    return flag.startswith("!")


def remove_negation(flag: str) -> str:
    """Drop the leading negation mark."""
    return flag[1:]


@dataclass
class Flags:
    """A set of flags raised during play."""

    flags: set[str] = field(default_factory=set)

    def add(self, flag: str) -> None:
        self.flags.add(flag)

    def remove(self, flag: str) -> None:
        self.flags.discard(flag)

    def remove_containing_substring(self, substring: str) -> None:
        """Drop every flag that contains the substring."""
        self.flags = {flag for flag in self.flags if substring not in flag}

    def check(self, flag: str) -> bool:
        """Tell whether a flag is set, or for ``!name`` whether it is not."""
        if is_negative(flag):
            return remove_negation(flag) not in self.flags
        return flag in self.flags