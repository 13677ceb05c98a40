"""
Day splitter: distributes a flat exercise pool across the days of a split.

The assignment runs as a fixed sequence of passes over a per-day arena:

A. Primary pass     - exercises go to the first day targeting their primary muscle
B. Secondary pass   - leftovers go to the least-loaded day sharing any muscle
C. Rebalancing      - move exercises from overloaded to least-loaded days
D. Minimum fill     - top up days below the minimum, repeating exercises if needed
E. Spacing repair   - keep high-recovery lifts off back-to-back days (4+ sessions)

Every constraint is soft: when a strict assignment is infeasible the pass
relaxes instead of failing, so a call always returns one session per day.
Each pass returns the assignment reasons it produced; the caller's input
list is never mutated.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

from core.constants import (
    DEFAULT_PROGRAM_DURATION_WEEKS,
    MAX_EXERCISES_PER_SESSION,
    MIN_EXERCISES_PER_SESSION,
    MINIMUM_FILL_MAX_ITERATIONS,
    REBALANCE_MAX_ITERATIONS,
    RECOVERY_SPACING_MIN_FREQUENCY,
)
from models.diagnostics import AssignmentPass, AssignmentReason, SplitDiagnostics
from models.exercise import CANONICAL_MUSCLE_ORDER, Exercise, MuscleGroup
from models.generation import GenerationInput
from models.program import WorkoutProgram
from services.exercise_selector import exercise_sort_key, order_exercises
from services.program_assembler import assemble_program
from services.split_templates import (
    SplitTemplate,
    distribute_muscle_groups,
    get_consecutive_day_pairs,
    get_muscle_groups_for_frequency,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitterLimits:
    """Session bounds and iteration caps used by the splitter passes."""

    max_per_session: int = MAX_EXERCISES_PER_SESSION
    min_per_session: int = MIN_EXERCISES_PER_SESSION
    rebalance_max_iterations: int = REBALANCE_MAX_ITERATIONS
    minimum_fill_max_iterations: int = MINIMUM_FILL_MAX_ITERATIONS

    def __post_init__(self):
        if self.min_per_session < 0 or self.max_per_session < 1:
            raise ValueError("Session bounds must be positive")
        if self.min_per_session > self.max_per_session:
            raise ValueError(
                f"min_per_session ({self.min_per_session}) exceeds "
                f"max_per_session ({self.max_per_session})"
            )


@dataclass
class SplitResult:
    """Generated program plus the assignment trace that produced it."""

    program: WorkoutProgram
    diagnostics: SplitDiagnostics


class DayArena:
    """
    Mutable per-day exercise lists for a single splitter run.

    Days are addressed by their index in the split. Assignment is tracked by
    exercise ID, so the same Exercise may sit in several days at once.
    """

    def __init__(self, templates: Sequence[SplitTemplate], spacing_enabled: bool):
        self.templates = list(templates)
        self.days: List[List[Exercise]] = [[] for _ in self.templates]
        self.assigned: Set[int] = set()
        self.consecutive_pairs = get_consecutive_day_pairs(self.templates)
        self.spacing_enabled = spacing_enabled and bool(self.consecutive_pairs)

        self._neighbours: Dict[int, List[int]] = {i: [] for i in range(len(self.templates))}
        for earlier, later in self.consecutive_pairs:
            self._neighbours[earlier].append(later)
            self._neighbours[later].append(earlier)

    def __len__(self) -> int:
        return len(self.days)

    def count(self, idx: int) -> int:
        return len(self.days[idx])

    def counts(self) -> List[int]:
        return [len(day) for day in self.days]

    def contains(self, idx: int, exercise: Exercise) -> bool:
        return any(ex.id == exercise.id for ex in self.days[idx])

    def add(self, idx: int, exercise: Exercise) -> None:
        self.days[idx].append(exercise)
        self.assigned.add(exercise.id)

    def remove(self, idx: int, exercise: Exercise) -> None:
        self.days[idx] = [ex for ex in self.days[idx] if ex.id != exercise.id]

    def is_compatible(self, idx: int, exercise: Exercise) -> bool:
        """True if the exercise works any muscle the day targets."""
        return exercise.targets_any(self.templates[idx].target_muscles)

    def neighbours(self, idx: int) -> List[int]:
        """Days trained immediately before or after this one."""
        return self._neighbours[idx]

    def violates_spacing(self, idx: int, exercise: Exercise, ignore: Optional[int] = None) -> bool:
        """
        True if placing the exercise on this day would put a high-recovery
        lift on back-to-back days. ``ignore`` skips a neighbour the exercise
        is about to leave.
        """
        if not self.spacing_enabled or not exercise.is_high_recovery:
            return False
        return any(
            self.contains(n, exercise) for n in self.neighbours(idx) if n != ignore
        )

    def holds_high_recovery(self, idx: int) -> bool:
        return any(ex.is_high_recovery for ex in self.days[idx])

    def session_name(self, idx: int) -> str:
        return self.templates[idx].name


def distribute_exercises(
    generation_input: GenerationInput,
    exercises: Sequence[Exercise],
    limits: Optional[SplitterLimits] = None,
    duration_weeks: int = DEFAULT_PROGRAM_DURATION_WEEKS,
) -> SplitResult:
    """
    Distribute an exercise pool over the days of the input's weekly split.

    Args:
        generation_input: Frequency, equipment and focus of the request
        exercises: Candidate pool (typically from select_initial_exercises)
        limits: Session bounds and iteration caps (defaults from constants)
        duration_weeks: Program length in weeks

    Returns:
        SplitResult with a program holding exactly ``generation_input.frequency``
        sessions, and the diagnostics trace
    """
    limits = limits or SplitterLimits()
    templates = distribute_muscle_groups(generation_input.frequency)
    pool = _dedupe(exercises)

    logger.info(
        f"Distributing {len(pool)} exercises over {len(templates)} sessions "
        f"(focus={generation_input.focus.value})"
    )

    missing = _missing_muscle_groups(pool, generation_input.frequency)
    if missing:
        logger.warning(
            f"Missing coverage for: {', '.join(m.value for m in missing)}"
        )

    arena = DayArena(
        templates,
        spacing_enabled=generation_input.frequency >= RECOVERY_SPACING_MIN_FREQUENCY,
    )

    assignments = [
        *_primary_pass(arena, pool, limits),
        *_secondary_pass(arena, pool, limits),
        *_rebalance(arena, limits),
        *_fill_minimum(arena, pool, limits),
        *_repair_recovery_spacing(arena, limits),
    ]

    underfilled = [
        arena.session_name(i) for i in range(len(arena))
        if arena.count(i) < limits.min_per_session
    ]
    if underfilled:
        logger.warning(
            f"Sessions below {limits.min_per_session} exercises: {', '.join(underfilled)}"
        )

    unassigned = [ex for ex in pool if ex.id not in arena.assigned]
    if unassigned:
        logger.info(f"{len(unassigned)} exercises could not be assigned to any session")

    program, ordering = assemble_program(
        generation_input, arena.templates, arena.days, duration_weeks=duration_weeks
    )

    return SplitResult(
        program=program,
        diagnostics=SplitDiagnostics(
            assignments=assignments,
            ordering=ordering,
            unassigned=unassigned,
            missing_muscle_groups=missing,
        ),
    )


# -------------------------------------------------------------------------
# Passes
# -------------------------------------------------------------------------


def _primary_pass(
    arena: DayArena,
    pool: List[Exercise],
    limits: SplitterLimits,
) -> List[AssignmentReason]:
    """Stage A: front-load each day with exercises whose primary muscle it targets."""
    trace = []

    for idx, template in enumerate(arena.templates):
        matches = [
            ex for ex in pool
            if template.targets(ex.primary_muscle) and ex.id not in arena.assigned
        ]
        for exercise in order_exercises(matches)[: limits.max_per_session]:
            arena.add(idx, exercise)
            trace.append(
                _reason(
                    arena, exercise, idx, AssignmentPass.PRIMARY,
                    f"Primary muscle {exercise.primary_muscle.value} matches session",
                )
            )

    logger.debug(f"Primary pass loads: {arena.counts()}")
    return trace


def _secondary_pass(
    arena: DayArena,
    pool: List[Exercise],
    limits: SplitterLimits,
) -> List[AssignmentReason]:
    """Stage B: place leftovers on the least-loaded day sharing any muscle."""
    trace = []

    for exercise in pool:
        if exercise.id in arena.assigned:
            continue

        compatible = [
            idx for idx in range(len(arena))
            if arena.is_compatible(idx, exercise)
            and arena.count(idx) < limits.max_per_session
        ]
        if not compatible:
            continue

        target = min(compatible, key=lambda idx: (arena.count(idx), idx))
        arena.add(target, exercise)
        trace.append(
            _reason(
                arena, exercise, target, AssignmentPass.SECONDARY,
                "Secondary muscle match, assigned to least-loaded compatible session",
            )
        )

    logger.debug(f"Secondary pass loads: {arena.counts()}")
    return trace


def _rebalance(arena: DayArena, limits: SplitterLimits) -> List[AssignmentReason]:
    """
    Stage C: shrink the spread between the heaviest and lightest day.

    Stops once the spread is at most one, when no valid move exists, or
    after ``rebalance_max_iterations`` moves.
    """
    trace = []

    for _ in range(limits.rebalance_max_iterations):
        counts = arena.counts()
        min_count, max_count = min(counts), max(counts)
        if max_count - min_count <= 1:
            break

        overloaded = sorted(
            (idx for idx, count in enumerate(counts) if count > min_count + 1),
            key=lambda idx: -counts[idx],
        )
        underloaded = [idx for idx, count in enumerate(counts) if count == min_count]

        move = _find_rebalance_move(arena, overloaded, underloaded)
        if move is None:
            logger.debug(f"Rebalancing stopped early with loads {counts}")
            break

        source, target, exercise = move
        arena.remove(source, exercise)
        arena.add(target, exercise)
        trace.append(
            _reason(
                arena, exercise, target, AssignmentPass.REBALANCE,
                f"Moved from session {source + 1} to balance counts",
            )
        )

    return trace


def _find_rebalance_move(
    arena: DayArena,
    overloaded: List[int],
    underloaded: List[int],
) -> Optional[Tuple[int, int, Exercise]]:
    for source in overloaded:
        for target in underloaded:
            for exercise in arena.days[source]:
                if arena.is_compatible(target, exercise) and not arena.contains(target, exercise):
                    return source, target, exercise
    return None


def _fill_minimum(
    arena: DayArena,
    pool: List[Exercise],
    limits: SplitterLimits,
) -> List[AssignmentReason]:
    """
    Stage D: top up days below the minimum session size.

    Unassigned exercises are preferred, then already-assigned ones in
    priority order, so compound lifts are the first to be repeated across
    days. Candidates never break recovery spacing; muscle compatibility is
    relaxed only when no compatible candidate is left.
    """
    trace = []

    for _ in range(limits.minimum_fill_max_iterations):
        needing = sorted(
            (idx for idx in range(len(arena)) if arena.count(idx) < limits.min_per_session),
            key=lambda idx: (arena.count(idx), idx),
        )
        if not needing:
            break

        unassigned = [ex for ex in pool if ex.id not in arena.assigned]
        assigned = sorted(
            (ex for ex in pool if ex.id in arena.assigned), key=exercise_sort_key
        )
        candidates = unassigned + assigned
        if not candidates:
            break

        added_any = False
        for idx in needing:
            if arena.count(idx) >= limits.max_per_session:
                continue

            eligible = [
                ex for ex in candidates
                if not arena.contains(idx, ex) and not arena.violates_spacing(idx, ex)
            ]
            compatible = [ex for ex in eligible if arena.is_compatible(idx, ex)]

            if compatible:
                exercise, label = compatible[0], "compatible"
            elif eligible:
                exercise, label = eligible[0], "fallback"
            else:
                continue

            arena.add(idx, exercise)
            added_any = True
            trace.append(
                _reason(
                    arena, exercise, idx, AssignmentPass.MINIMUM,
                    f"Added to satisfy minimum exercises per session ({label})",
                )
            )

        if not added_any:
            break

    logger.debug(f"Minimum fill loads: {arena.counts()}")
    return trace


def _repair_recovery_spacing(
    arena: DayArena,
    limits: SplitterLimits,
) -> List[AssignmentReason]:
    """
    Stage E: move high-recovery lifts off back-to-back days.

    The later day of a conflicting pair gives up the exercise first; if no
    day can take it, the earlier day is tried. Unresolvable conflicts are
    left in place.
    """
    trace = []
    if not arena.spacing_enabled:
        return trace

    for earlier, later in arena.consecutive_pairs:
        conflicts = [
            ex for ex in arena.days[later]
            if ex.is_high_recovery and arena.contains(earlier, ex)
        ]

        for exercise in conflicts:
            relocated = False
            for source in (later, earlier):
                target = _find_relocation_target(arena, exercise, source, limits)
                if target is None:
                    continue

                arena.remove(source, exercise)
                arena.add(target, exercise)
                trace.append(
                    _reason(
                        arena, exercise, target, AssignmentPass.SPACING,
                        f"Moved from {arena.session_name(source)} to avoid "
                        f"back-to-back days",
                    )
                )
                relocated = True
                break

            if not relocated:
                logger.warning(
                    f"Could not separate {exercise.name} on "
                    f"{arena.session_name(earlier)} and {arena.session_name(later)}"
                )

    return trace


def _find_relocation_target(
    arena: DayArena,
    exercise: Exercise,
    source: int,
    limits: SplitterLimits,
) -> Optional[int]:
    candidates = [
        idx for idx in range(len(arena))
        if idx != source
        and not arena.contains(idx, exercise)
        and arena.count(idx) < limits.max_per_session
        and arena.is_compatible(idx, exercise)
        and not arena.violates_spacing(idx, exercise, ignore=source)
    ]

    for idx in candidates:
        if not arena.holds_high_recovery(idx):
            return idx
    return candidates[0] if candidates else None


# -------------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------------


def _dedupe(exercises: Sequence[Exercise]) -> List[Exercise]:
    """Copy the pool, keeping the first occurrence of each exercise ID."""
    seen: Set[int] = set()
    pool = []
    for exercise in exercises:
        if exercise.id in seen:
            continue
        seen.add(exercise.id)
        pool.append(exercise)
    return pool


def _missing_muscle_groups(pool: List[Exercise], frequency: int) -> List[MuscleGroup]:
    """Muscle groups the split targets that no exercise in the pool works."""
    covered = {muscle for ex in pool for muscle in ex.muscle_groups}
    required = get_muscle_groups_for_frequency(frequency)
    return [m for m in CANONICAL_MUSCLE_ORDER if m in required and m not in covered]


def _reason(
    arena: DayArena,
    exercise: Exercise,
    idx: int,
    stage: AssignmentPass,
    reason: str,
) -> AssignmentReason:
    return AssignmentReason(
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        primary_muscle=exercise.primary_muscle,
        assigned_session_index=idx,
        assigned_session_name=arena.session_name(idx),
        stage=stage,
        reason=reason,
    )
