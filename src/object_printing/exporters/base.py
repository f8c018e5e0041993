"""
Base dump exporter abstract class.

Defines the interface and common functionality for writing printed
objects to a file. Subclasses decide the layout of header, objects and
footer.
"""

import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, AsyncIterable, Dict, Iterable, Optional, Union

import aiofiles

from ..config import PrintingConfig
from ..utils.stats import DumpStats

ObjectSource = Union[Iterable[Any], AsyncIterable[Any]]


class BaseDumpExporter(ABC):
    """
    Abstract base class for dump exporters.

    Provides file handling and statistics; subclasses implement the
    format-specific write methods.
    """

    def __init__(
        self,
        output_path: str,
        config: Optional[PrintingConfig] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize exporter with output configuration.

        Args:
            output_path: Path where to write the dump
            config: Printing configuration (defaults if omitted)
            options: Format-specific options

        Raises:
            ValueError: If output_path is empty or None
        """
        if not output_path:
            raise ValueError("output_path cannot be empty")

        self.output_path = output_path
        self.config = config or PrintingConfig()
        self.options = options or {}
        self.stats = DumpStats()
        self._file: Any = None

    @property
    def newline(self) -> str:
        return self.config.settings.newline

    @abstractmethod
    async def write_header(self) -> None:
        """Write anything that precedes the first object."""
        pass

    @abstractmethod
    async def write_object(self, obj: Any) -> None:
        """
        Print and write a single object.

        Args:
            obj: The object to print
        """
        pass

    @abstractmethod
    async def write_footer(self) -> None:
        """Write anything that follows the last object."""
        pass

    async def write_text(self, text: str) -> None:
        """Write raw text to the open file and account for it in stats."""
        if self._file is None:
            raise RuntimeError("export_objects must be running to write text")
        await self._file.write(text)
        self.stats.bytes_written += len(text.encode("utf-8"))

    async def export_objects(self, objects: ObjectSource) -> DumpStats:
        """
        Export objects to file.

        This is the main entry point that orchestrates the export process:
        1. Creates parent directories if needed
        2. Opens output file
        3. Writes header
        4. Writes all objects
        5. Writes footer
        6. Closes file

        Args:
            objects: Iterable or async iterable of objects to print

        Returns:
            Statistics for the export

        Raises:
            Exception: Any errors during export are propagated
        """
        output_dir = Path(self.output_path).parent
        output_dir.mkdir(parents=True, exist_ok=True)

        self.stats = DumpStats()

        # newline="" keeps the configured line terminator byte-for-byte
        async with aiofiles.open(self.output_path, mode="w", encoding="utf-8", newline="") as f:
            self._file = f
            try:
                await self.write_header()

                if hasattr(objects, "__aiter__"):
                    async for obj in objects:
                        await self.write_object(obj)
                else:
                    for obj in objects:
                        await self.write_object(obj)

                await self.write_footer()
            finally:
                self._file = None

        self.stats.end_time = time.time()
        return self.stats
