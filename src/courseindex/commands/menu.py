"""
courseindex.commands.menu - Interactive course planner menu.

Options:
    1. Load a catalog file (default or custom name)
    2. Print the course list
    3. Print one course with its prerequisites
    9. Exit

A load that accepts no courses leaves the previously loaded catalog in
place.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable

from courseindex.commands.common import (
    format_course,
    load_catalog,
    load_configuration,
    resolve_catalog_file,
)
from courseindex.core import Catalog

MENU = """1. Load Data Structure.
2. Print Course List.
3. Print Course.
9. Exit"""

InputFunc = Callable[[str], str]


def run(args: argparse.Namespace) -> int:
    """Run the interactive menu."""
    config = load_configuration(args)
    catalog = Catalog()

    print("Welcome to the course planner.")
    print()

    if getattr(args, "file", None):
        _load(catalog, resolve_catalog_file(args, config), config)

    return run_menu(catalog, config)


def run_menu(
    catalog: Catalog, config: dict[str, Any], input_func: InputFunc | None = None
) -> int:
    """Menu loop over an existing catalog. Returns when the user exits or input ends."""
    if input_func is None:
        input_func = input
    while True:
        print(MENU)
        try:
            raw_choice = input_func("What would you like to do? ").strip()
        except EOFError:
            print()
            return 0

        try:
            choice = int(raw_choice)
        except ValueError:
            print(f"{raw_choice} is not a valid option.")
            print()
            continue

        try:
            if choice == 1:
                _load_prompt(catalog, config, input_func)
            elif choice == 2:
                _print_course_list(catalog)
            elif choice == 3:
                _print_course(catalog, input_func)
            elif choice == 9:
                print("Thank you for using the course planner!")
                return 0
            else:
                print(f"{choice} is not a valid option.")
                print()
        except EOFError:
            print()
            return 0


def _load_prompt(catalog: Catalog, config: dict[str, Any], input_func: InputFunc) -> None:
    default_file = config["catalog"]["default_file"]
    print()
    print("Load Options:")
    print(f'  1. Load "{default_file}"')
    print("  2. Enter custom file name")
    print("  3. Cancel")
    selection = input_func("Select an option: ").strip()

    if selection == "1":
        _load(catalog, Path(default_file), config)
    elif selection == "2":
        filename = input_func("Enter the file name: ").strip()
        _load(catalog, Path(filename), config)
    elif selection == "3":
        print("Load cancelled.")
    else:
        print("Invalid option.")
    print()


def _load(catalog: Catalog, path: Path, config: dict[str, Any]) -> None:
    print(f"Loading {path}...")
    _, result = load_catalog(path, config, catalog=catalog)
    if result is not None:
        for message in result.diagnostics:
            print(f"Warning: {message}")
        print(f"{result.success_count} courses loaded.")
    if result is None or not result.ok:
        print("Load failed. Previous data preserved.")


def _print_course_list(catalog: Catalog) -> None:
    if not catalog.is_loaded:
        print("No data loaded. Please load data first.")
        print()
        return
    print("Here is a sample schedule:")
    print()
    for course_id, name in catalog.list_all():
        print(f"{course_id}, {name}")
    print()


def _print_course(catalog: Catalog, input_func: InputFunc) -> None:
    if not catalog.is_loaded:
        print("No data loaded. Please load data first.")
        print()
        return
    course_id = input_func("What course do you want to know about? ").strip()
    course = catalog.lookup(course_id)
    if course is None:
        print(f"Course {course_id} not found.")
    else:
        print(format_course(course))
    print()
