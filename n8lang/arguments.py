"""Command-line argument handling for the interpreter."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional


class ArgumentParser:
    """Recognises declared ``-short``/``--long`` flags and collects input files."""

    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        self._argv: list[str] = list(sys.argv if argv is None else argv)
        self._parameters: dict[str, str] = {}
        self._descriptions: dict[str, str] = {}

    def define_parameter(self, short: str, long: str, description: str) -> None:
        """Declare a flag by its short and long names."""
        self._parameters[short] = long
        self._descriptions[short] = description
        self._descriptions[long] = description

    def has_parameter(self, short: str) -> bool:
        """Return whether the declared flag was given in either form.

        Raises KeyError if no flag with that short name was declared.
        """
        if short not in self._parameters:
            raise KeyError(f"Undefined parameter: {short}")
        forms = {"-" + short, "--" + self._parameters[short]}
        return any(arg in forms for arg in self._argv)

    @property
    def program_file_name(self) -> str:
        """The name the program was started with."""
        if not self._argv:
            raise IndexError("No program name in argument list")
        return self._argv[0]

    def input_files(self) -> list[str]:
        """Return every argument after the program name that is not a declared flag."""
        long_names = set(self._parameters.values())
        files: list[str] = []
        for arg in self._argv[1:]:
            if arg.startswith("--"):
                if arg[2:] in long_names:
                    continue
            elif arg.startswith("-"):
                if arg[1:] in self._parameters:
                    continue
            files.append(arg)
        return files

    def help_text(self) -> str:
        """Return the list of declared flags with their descriptions."""
        lines = ["", "\u001b[32mArguments\u001b[0m: "]
        lines.extend(
            f"  -{short}, --{long}: {self._descriptions[short]}"
            for short, long in sorted(self._parameters.items())
        )
        return "\n".join(lines) + "\n"