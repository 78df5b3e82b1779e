"""
Argument Loaders Module.

Loaders for sources shaped as a list of "name<delimiter>value" tokens,
such as command-line arguments, and for sources already shaped as a
mapping of name to raw value.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Set, Tuple

from loguru import logger

from propconf.load.base import Loader
from propconf.load.problems import ParsingProblem
from propconf.load.values import LoaderValues
from propconf.properties.base import Property
from propconf.registry.registry import PropertyRegistry


class StringArgumentLoader(Loader):
    """
    Loads values from "name=value" string tokens.

    The first delimiter in a token splits it; there is no escaping.

    Usage::

        loader = StringArgumentLoader(sys.argv[1:])
        values = loader.load(registry)
        if values.has_problems:
            ...
    """

    KVP_DELIMITER = "="

    def __init__(
        self,
        args: Iterable[str],
        delimiter: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Initialize the loader.

        Args:
            args: Tokens to load (a list, tuple or any iterable of strings).
            delimiter: Key/value delimiter (defaults to KVP_DELIMITER).
            name: Loader name used in problems and logs.
        """
        super().__init__(name)
        self.delimiter = delimiter if delimiter is not None else self.KVP_DELIMITER
        if not self.delimiter:
            raise ValueError("The key/value delimiter must be a non-empty string")
        self.args: Tuple[str, ...] = tuple(args)

    def split_token(self, token: str) -> Optional[Tuple[str, str]]:
        """Split a token at the first delimiter, or return None if there is none."""
        key, found, value = token.partition(self.delimiter)
        if not found:
            return None
        return key, value

    def _read(
        self,
        registry: PropertyRegistry,
        result: LoaderValues,
        assigned: Set[Property],
    ) -> None:
        logger.debug(f"[Loader: {self.name}] Reading {len(self.args)} tokens")
        for token in self.args:
            if not isinstance(token, str):
                result.problems.append(
                    ParsingProblem(
                        loader_name=self.name,
                        token=repr(token),
                        reason=f"expected a string, got {type(token).__name__}",
                    )
                )
                continue

            parts = self.split_token(token)
            if parts is None:
                result.problems.append(
                    ParsingProblem(
                        loader_name=self.name,
                        token=token,
                        reason=f"no '{self.delimiter}' between name and value",
                    )
                )
                continue

            raw_key, raw_value = parts
            self._assign(registry, result, assigned, raw_key, raw_value, token=token)


class ColonArgumentLoader(StringArgumentLoader):
    """Loads values from "name:value" string tokens."""

    KVP_DELIMITER = ":"


class MappingLoader(Loader):
    """
    Loads values from a mapping of name to raw string value.

    This is the shape an environment-variable or file source hands over
    once it has been read. None values are treated as absent.
    """

    def __init__(self, mapping: Mapping[str, Optional[str]], name: Optional[str] = None) -> None:
        super().__init__(name)
        self.mapping = dict(mapping)

    def _read(
        self,
        registry: PropertyRegistry,
        result: LoaderValues,
        assigned: Set[Property],
    ) -> None:
        logger.debug(f"[Loader: {self.name}] Reading {len(self.mapping)} entries")
        for raw_key, raw_value in self.mapping.items():
            if raw_value is not None and not isinstance(raw_value, str):
                raw_value = str(raw_value)
            self._assign(registry, result, assigned, str(raw_key), raw_value)
