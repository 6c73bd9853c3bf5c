"""Interactive menu for editing a word dictionary."""

from __future__ import annotations

import sys
from typing import Sequence

from labkit.dictionary import Dictionary, dict_from_file, dict_to_file
from labkit.strings import readline

RESULT_PREFIX = "\t-> "

_MENU = (
    "\nChoose what you want to do. Options are:\n"
    "\n"
    "\t**************************************************************\n"
    "\t* z: Size of the dictionary                                  *\n"
    "\t* s: Search for a definition in the dict                     *\n"
    "\t* a: Add a new word to the dict                              *\n"
    "\t* r: Remove a word from the dict                             *\n"
    "\t* c: Change a definition to the dict                         *\n"
    "\t* e: Empty the dict                                          *\n"
    "\t* h: Show the dict in stdout                                 *\n"
    "\t* l: Load the dict from a file                               *\n"
    "\t* u: Dump the dict to a file                                 *\n"
    "\t* q: Quit                                                    *\n"
    "\t**************************************************************\n"
    "\nPlease enter your choice: "
)


def _read() -> str:
    line = readline(sys.stdin)
    if line is None:
        raise EOFError
    return line


def _get_input(message: str) -> str:
    print(f"\t{message}: ", end="", flush=True)
    return _read()


def _result(message: str) -> None:
    print(f"{RESULT_PREFIX}{message}")


def _on_add(current: Dictionary) -> None:
    word = _get_input("Please enter the word to add into the dict")
    if word in current:
        _result("The word is already in the dict.")
    else:
        definition = _get_input("Please enter the definition")
        current.add(word, definition)
        _result("The word and definition were added.")


def _on_replace(current: Dictionary) -> None:
    word = _get_input("Please enter the word to replace in the dict")
    if word not in current:
        _result("The word does not exist in the dict.")
    else:
        definition = _get_input("Please enter the new definition")
        current.add(word, definition)
        _result("The definition was replaced.")


def _on_remove(current: Dictionary) -> None:
    word = _get_input("Please enter the word to delete from the dict")
    if word not in current:
        _result("The word does not exist in the dict.")
    else:
        current.remove(word)
        _result("The word was removed.")


def _on_load(current: Dictionary) -> Dictionary:
    filename = _get_input("Please enter the filename to load the dict from")
    try:
        other = dict_from_file(filename)
    except OSError:
        print(f"Can not load dict from filename {filename}")
        return current
    _result("The dictionary was successfully loaded.")
    return other


def _on_dump(current: Dictionary) -> None:
    filename = _get_input("Please enter the filename to dump the file")
    try:
        dict_to_file(current, filename)
    except OSError:
        print(f"Can not dump dict to filename {filename}.")
    else:
        print(f"Dumping dict to filename {filename}.")
    _result("The dictionary was successfully dumped.")


def _on_empty(current: Dictionary) -> None:
    current.clear()
    _result("All words were removed")


def _on_search(current: Dictionary) -> None:
    word = _get_input("Please enter the word to search in the dict")
    definition = current.search(word)
    if definition is None:
        _result("The word does not exist in the dict")
    else:
        _result(f'The definition of "{word}" is : "{definition}"')


def _on_show(current: Dictionary) -> None:
    current.dump(sys.stdout)


def _on_size(current: Dictionary) -> None:
    _result(f"The size of the dict is {len(current)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dictionary menu on standard input until the user quits."""
    current = Dictionary()
    handlers = {
        "a": _on_add,
        "r": _on_remove,
        "c": _on_replace,
        "u": _on_dump,
        "e": _on_empty,
        "s": _on_search,
        "h": _on_show,
        "z": _on_size,
    }
    try:
        while True:
            print(_MENU, end="", flush=True)
            line = _read()
            option = line[:1]
            if option == "q":
                _result("Exiting.")
                return 0
            if option == "l":
                current = _on_load(current)
            elif option in handlers:
                handlers[option](current)
            else:
                print(f'\n"{option}" is invalid. Please choose a valid option.\n')
    except EOFError:
        print()
        _result("Exiting.")
        return 0


if __name__ == "__main__":
    sys.exit(main())