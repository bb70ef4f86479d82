"""Short-lived named signals that expire after a lifetime."""

from dataclasses import dataclass, field


@dataclass
class EmitProperties:
    """Lifetime of one emit: positive is timed, zero instant, negative endless."""

    duration: float
    elapsed: float = 0.0


@dataclass
class EmitStorage:
    """Holds emits; new ones become visible on the next update."""

    emits: dict[str, EmitProperties] = field(default_factory=dict)
    emit_queue: dict[str, EmitProperties] = field(default_factory=dict)
    _changed_held: bool = False
    _changed_released: bool = False

    def update(self, elapsed_time: float) -> None:
        self._changed_released = self._changed_held
        self._changed_held = False

        expired = []
        for name, props in self.emits.items():
            if props.duration > 0:
                props.elapsed += elapsed_time
                if props.elapsed > props.duration:
                    expired.append(name)
            elif props.duration == 0:
                expired.append(name)
        for name in expired:
            del self.emits[name]
            self._changed_held = True

        # Queued emits whose name is already live stay queued.
        for name in [n for n in self.emit_queue if n not in self.emits]:
            self.emits[name] = self.emit_queue.pop(name)

    def changed(self) -> bool:
        """Tell whether the set of emits changed during the previous frame."""
        return self._changed_released

    def emit_add(self, emit: str, lifetime: int) -> None:
        self.emit_queue[emit] = EmitProperties(lifetime)
        self._changed_held = True

    def emit_present(self, emit: str) -> bool:
        return emit in self.emits

    def emit_remove(self, emit: str) -> None:
        self.emits.pop(emit, None)
        self._changed_held = True

    def clear(self) -> None:
        self.emits.clear()
        self._changed_held = True