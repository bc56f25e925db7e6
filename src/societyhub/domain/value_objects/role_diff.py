"""Role diff - minimal add/remove sets between current and desired roles."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class RoleDiff:
    """Difference between a student's current and desired role ids.

    The baseline role is injected into the desired set and never appears
    in ``to_remove``. ``explicit_empty`` marks a caller that asked for an
    empty role list, which still runs the apply step when nothing changes.
    """

    current: frozenset[UUID]
    desired: frozenset[UUID]
    to_add: frozenset[UUID]
    to_remove: frozenset[UUID]
    baseline_id: UUID | None = None
    explicit_empty: bool = False

    @classmethod
    def compute(
        cls,
        current: set[UUID] | frozenset[UUID],
        desired: list[UUID] | None,
        baseline_id: UUID | None = None,
    ) -> "RoleDiff":
        """Build diff. ``desired=None`` means no role ids were supplied."""
        current_set = frozenset(current)
        desired_set = set(current_set) if desired is None else set(desired)
        if baseline_id is not None:
            desired_set.add(baseline_id)

        to_add = desired_set - current_set
        to_remove = current_set - desired_set
        if baseline_id is not None:
            to_remove = to_remove - {baseline_id}

        return cls(
            current=current_set,
            desired=frozenset(desired_set),
            to_add=frozenset(to_add),
            to_remove=frozenset(to_remove),
            baseline_id=baseline_id,
            explicit_empty=desired is not None and len(desired) == 0,
        )

    @property
    def non_baseline_desired(self) -> frozenset[UUID]:
        """Desired ids that must be validated against the society's roles."""
        if self.baseline_id is None:
            return self.desired
        return self.desired - {self.baseline_id}

    @property
    def is_noop(self) -> bool:
        return not self.to_add and not self.to_remove

    @property
    def requires_apply(self) -> bool:
        """True when the atomic apply step must run."""
        return not self.is_noop or self.explicit_empty

    @property
    def result(self) -> frozenset[UUID]:
        """Role ids held after the diff is applied."""
        return (self.current - self.to_remove) | self.to_add
