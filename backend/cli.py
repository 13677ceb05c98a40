"""
Split Planner CLI - inspect exercise selection and split generation.

Usage:
    python -m backend.cli select [options]      - Show the automatic exercise selection
    python -m backend.cli plan [options]        - Generate a plan and show the assignment trace
    python -m backend.cli available [options]   - List exercises usable with the equipment
    python -m backend.cli interactive [options] - Edit the selection, then generate

Common options:
    --frequency N          Sessions per week (2-5, default 3)
    --equipment A,B        Available equipment (default Bodyweight)
    --focus F              Balanced, Strength or Endurance (default Balanced)
    --catalog PATH         Exercise catalog YAML (default: bundled catalog)
    --log-level LEVEL      Logging level (default from LOG_LEVEL)
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from application.exceptions import UnknownExerciseError
from backend.formatter import (
    print_available_exercises,
    print_exercise_list,
    print_plan_table,
    print_selection_table,
)
from backend.settings import get_settings
from infrastructure.catalog import YamlExerciseRepository
from models.exercise import Equipment, Exercise
from models.generation import GenerationInput
from models.program import TrainingFocus
from services.program_generator import ProgramGenerator

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  remove <#>          Remove exercise by number
  remove <name>       Remove exercise by name
  add <name>          Add exercise by name
  list                Show current selected exercises
  available           Show all exercises matching equipment
  done                Generate plan from current list
  regenerate          Re-run selection with current inputs
  set frequency <n>   Change frequency and re-run selection
  set equipment <x>   Change equipment and re-run selection
  set focus <x>       Change focus (Balanced|Strength|Endurance)
  help                Show commands
  exit                Quit
"""


def parse_list(value: str) -> List[str]:
    """Split a comma-separated argument, dropping blanks."""
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_equipment(value: str) -> List[Equipment]:
    """Parse a comma-separated equipment list, case-insensitively."""
    lookup = {e.value.lower(): e for e in Equipment}
    equipment = []
    for item in parse_list(value):
        if item.lower() not in lookup:
            raise ValueError(
                f"Unknown equipment '{item}'. Choose from: "
                f"{', '.join(e.value for e in Equipment)}"
            )
        equipment.append(lookup[item.lower()])
    return equipment or [Equipment.BODYWEIGHT]


def parse_focus(value: str) -> TrainingFocus:
    lookup = {f.value.lower(): f for f in TrainingFocus}
    if value.strip().lower() not in lookup:
        raise ValueError("Focus must be Balanced, Strength, or Endurance.")
    return lookup[value.strip().lower()]


def _argparse_type(parser_fn: Callable):
    def convert(value: str):
        try:
            return parser_fn(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e))
    return convert


def print_inputs(generation_input: GenerationInput) -> None:
    print(f"Frequency: {generation_input.frequency} days")
    print(f"Focus: {generation_input.focus.value}")
    print(f"Equipment: {', '.join(e.value for e in generation_input.equipment)}")
    print("")


def print_plan(generator: ProgramGenerator, generation_input: GenerationInput, pool) -> None:
    response = generator.generate_from_pool(generation_input, pool)
    print_plan_table(response.diagnostics, response.program.sessions)
    volumes = ", ".join(str(v) for v in response.session_volumes)
    print(f"Suggested sets per muscle per session: {volumes}")
    print("")


class InteractiveSession:
    """
    Line-oriented editor for the working exercise selection.

    ``handle`` processes one command and returns False once the user exits,
    so the loop can be driven from tests without a terminal.
    """

    def __init__(
        self,
        generator: ProgramGenerator,
        generation_input: GenerationInput,
    ):
        self.generator = generator
        self.generation_input = generation_input
        self.selected: List[Exercise] = []

    def run_selection(self) -> None:
        result = self.generator.select(
            self.generation_input.equipment, self.generation_input.frequency
        )
        self.selected = list(result.selected)
        print_selection_table(result.diagnostics)

    def run(self, read_line: Callable[[str], str] = input) -> None:
        print("Type 'help' for commands.\n")
        while True:
            try:
                line = read_line("> ")
            except EOFError:
                break
            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        text = line.strip()
        if not text:
            return True

        command, _, args = text.partition(" ")
        command = command.lower()
        args = args.strip()

        if command == "exit":
            return False

        handler = {
            "remove": self._remove,
            "add": self._add,
            "list": lambda _: print_exercise_list(self.selected),
            "available": self._available,
            "done": lambda _: print_plan(self.generator, self.generation_input, self.selected),
            "regenerate": lambda _: self.run_selection(),
            "set": self._set,
            "help": lambda _: print(HELP_TEXT),
        }.get(command)

        if handler is None:
            print("Unknown command. Type 'help' for commands.")
        else:
            handler(args)
        return True

    def _remove(self, args: str) -> None:
        if not args:
            print("Provide an exercise number or name.")
            return

        if args.isdigit():
            index = int(args)
            if 1 <= index <= len(self.selected):
                removed = self.selected.pop(index - 1)
                print(f"Removed: {removed.name}")
            else:
                print("No exercise at that index.")
            return

        name = args.lower()
        match = next((ex for ex in self.selected if ex.name.lower() == name), None)
        if match is None:
            print("Exercise not found in current list.")
            return
        self.selected = [ex for ex in self.selected if ex.id != match.id]
        print(f"Removed: {match.name}")

    def _add(self, args: str) -> None:
        if not args:
            print("Provide an exercise name.")
            return
        try:
            exercise = self.generator.resolve_names([args])[0]
        except UnknownExerciseError:
            print("Exercise not found in catalog.")
            return
        if any(ex.id == exercise.id for ex in self.selected):
            print("Exercise already in list.")
            return
        self.selected.append(exercise)
        print(f"Added: {exercise.name}")

    def _available(self, _: str) -> None:
        available = self.generator.available(self.generation_input.equipment)
        print(f"Available exercises: {len(available)}")
        if not available:
            print("No exercises available for current equipment.")
        print_available_exercises(available)

    def _set(self, args: str) -> None:
        field, _, value = args.partition(" ")
        value = value.strip()
        if not field or not value:
            print("Usage: set frequency <n> | set equipment <a,b> | set focus <type>")
            return

        update = self.generation_input.model_dump()
        try:
            if field == "frequency":
                update["frequency"] = int(value)
            elif field == "equipment":
                update["equipment"] = parse_equipment(value)
            elif field == "focus":
                update["focus"] = parse_focus(value)
            else:
                print("Unknown field. Use frequency, equipment, or focus.")
                return
            self.generation_input = GenerationInput(**update)
        except (ValueError, ValidationError) as e:
            print(f"Invalid {field}: {e}")
            return

        self.run_selection()


def cmd_select(args, generator: ProgramGenerator, generation_input: GenerationInput):
    """Show the automatic exercise selection."""
    result = generator.select(generation_input.equipment, generation_input.frequency)
    print_selection_table(result.diagnostics)


def cmd_plan(args, generator: ProgramGenerator, generation_input: GenerationInput):
    """Generate a plan from the automatic selection or a custom list."""
    if args.ids:
        pool = generator.resolve_ids(args.ids)
    elif args.exercises:
        pool = generator.resolve_names(args.exercises)
    else:
        result = generator.select(generation_input.equipment, generation_input.frequency)
        print_selection_table(result.diagnostics)
        pool = result.selected

    print_plan(generator, generation_input, pool)


def cmd_available(args, generator: ProgramGenerator, generation_input: GenerationInput):
    """List catalog exercises usable with the equipment."""
    available = generator.available(generation_input.equipment)
    print(f"Available exercises: {len(available)}")
    print_available_exercises(available)


def cmd_interactive(args, generator: ProgramGenerator, generation_input: GenerationInput):
    """Start the interactive selection editor."""
    session = InteractiveSession(generator, generation_input)
    session.run_selection()
    session.run()


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--frequency', '-n', type=int, default=3, help='Sessions per week (2-5)')
    common.add_argument(
        '--equipment', '-e', type=_argparse_type(parse_equipment),
        default=[Equipment.BODYWEIGHT], help='Comma-separated equipment (default: Bodyweight)',
    )
    common.add_argument(
        '--focus', '-f', type=_argparse_type(parse_focus),
        default=TrainingFocus.BALANCED, help='Balanced, Strength or Endurance',
    )
    common.add_argument('--catalog', help='Exercise catalog YAML file')
    common.add_argument('--log-level', help='Logging level (default: LOG_LEVEL setting)')

    parser = argparse.ArgumentParser(
        description='Split Planner CLI - Inspect exercise selection and split generation',
        prog='python -m backend.cli',
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    select_parser = subparsers.add_parser(
        'select', parents=[common], help='Show the automatic exercise selection'
    )
    select_parser.set_defaults(func=cmd_select)

    plan_parser = subparsers.add_parser(
        'plan', parents=[common], help='Generate a plan and show the assignment trace'
    )
    pool_group = plan_parser.add_mutually_exclusive_group()
    pool_group.add_argument(
        '--exercises', type=parse_list, help='Comma-separated exercise names to use as the pool'
    )
    pool_group.add_argument(
        '--ids', type=lambda v: [int(i) for i in parse_list(v)],
        help='Comma-separated exercise IDs to use as the pool',
    )
    plan_parser.set_defaults(func=cmd_plan)

    available_parser = subparsers.add_parser(
        'available', parents=[common], help='List exercises usable with the equipment'
    )
    available_parser.set_defaults(func=cmd_available)

    interactive_parser = subparsers.add_parser(
        'interactive', parents=[common], help='Edit the selection, then generate a plan'
    )
    interactive_parser.set_defaults(func=cmd_interactive)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the split planner CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        settings = get_settings()
        logging.basicConfig(
            level=(args.log_level or settings.log_level).upper(),
            format="%(levelname)s %(name)s: %(message)s",
        )

        generation_input = GenerationInput(
            frequency=args.frequency,
            equipment=args.equipment,
            focus=args.focus,
        )
        repo = YamlExerciseRepository(args.catalog or settings.exercise_catalog_path)
        generator = ProgramGenerator(
            exercise_repo=repo,
            limits=settings.splitter_limits,
            duration_weeks=settings.program_duration_weeks,
            per_muscle=settings.exercises_per_muscle,
        )

        logger.debug(f"Running {args.command} with {len(repo.get_all())} catalog exercises")
        print_inputs(generation_input)
        args.func(args, generator, generation_input)

    except ValidationError as e:
        print(f"Error: Invalid input: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
