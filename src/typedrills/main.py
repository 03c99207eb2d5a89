"""
Typedrills - worked solutions for optionals, protocols and closures

Runs each group of exercises and prints what the solutions produce, or runs
the static type checkers over the bundled snippets.
"""

import argparse
import sys
from pathlib import Path

from typedrills.artists import ANDY, DALI, MONET, Artist, Style
from typedrills.characters import Henchman, Hero
from typedrills.checkers import run_checkers
from typedrills.closures import (
    are_both_divisible_by_three,
    concatenate_small_strings,
    does_apply,
    have_same_digit_sum,
    manipulate_strings,
)
from typedrills.config import Settings
from typedrills.iteration import print_flattened
from typedrills.optionals import Person, my_name_is, my_name_is_matched
from typedrills.protocols import (
    CanMakeNoise,
    Cow,
    Elephant,
    Human,
    Orka,
    Ostrich,
    Pig,
    describe,
    make_all_noise,
)
from typedrills.vehicles import Bus, Car, Motorcycle, Truck, fastest


def run_optionals() -> None:
    maybe_person1: Person | None = Person(name="Kaichi")
    maybe_person2: Person | None = None

    for person in (maybe_person1, maybe_person2):
        print(my_name_is(person))
        print(my_name_is_matched(person))


def run_protocols() -> None:
    print(f"Human eats {Human().eat().value}, Orka eats {Orka().eat().value}")

    stormtrooper = Henchman(health=100, aim=-100)
    hero = Hero(health=100, strength=1000, aim=100)
    print(f"Henchman strength: {stormtrooper.strength}, Hero strength: {hero.strength}")

    print(describe(Ostrich()))

    fleet = [
        Car(max_speed=180, number_of_wheels=4, number_of_doors=4, model="Civic"),
        Truck(max_speed=120, number_of_wheels=18, number_of_doors=2, model="Actros"),
        Motorcycle(max_speed=200, number_of_wheels=2, number_of_doors=0, model="Ninja"),
        Bus(max_speed=100, number_of_wheels=6, number_of_doors=3, model="Citaro"),
    ]
    print(f"Fastest vehicle: {fastest(fleet).model}")

    makers: list[CanMakeNoise] = [Elephant(), Pig(), Cow()]
    make_all_noise(makers)

    kaichi = Artist(name="Kaichi Momose", style=Style.POP_ART, year_born=1994)
    for artist in (MONET, DALI, ANDY):
        print(artist == kaichi)

    print_flattened([[2, 5, 9], [0, 4, 2], [6, 8, 3]])


def run_closures() -> None:
    print(does_apply(47685, 344832, are_both_divisible_by_three))
    print(does_apply(85436, 53893, lambda a, b: a % 3 == 0 and b % 3 == 0))

    def both_divisible(a: int, b: int) -> bool:
        return a % 3 == 0 and b % 3 == 0

    print(does_apply(85436, 85436, both_divisible))
    print(does_apply(85436, 53893, have_same_digit_sum))

    manipulate_strings("abc", "def", concatenate_small_strings)
    manipulate_strings("abcdef", "ghijkl", concatenate_small_strings)
    manipulate_strings(
        "Momo", "Kaic", lambda a, b: a + b if len(a) < 5 and len(b) < 5 else None
    )


EXERCISES = {
    "optionals": run_optionals,
    "protocols": run_protocols,
    "closures": run_closures,
}


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Typedrills - worked solutions for optionals, protocols and closures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  typedrills                        Run every exercise group
  typedrills closures               Run the closure exercises only
  typedrills check                  Type check the bundled snippets
  typedrills check --dir my_snips   Type check another directory
        """,
    )

    parser.add_argument(
        "command",
        nargs="?",
        default="all",
        choices=["all", *EXERCISES, "check"],
        help="Command to run (default: all)",
    )
    parser.add_argument(
        "--dir",
        type=Path,
        default=None,
        help="Directory of snippets for 'check' (default: bundled snippets)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory to write results.json into (default: current directory)",
    )

    args = parser.parse_args(argv)

    try:
        if args.command == "check":
            settings = Settings.from_env()
            run_checkers(target_dir=args.dir, output_dir=args.output, settings=settings)
            return

        selected = EXERCISES if args.command == "all" else {args.command: EXERCISES[args.command]}
        for name, exercise in selected.items():
            print("=" * 60)
            print(name.upper())
            print("=" * 60)
            exercise()
            print()

    except ValueError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    except FileNotFoundError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
