from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..reports.model import ReportData


@dataclass(frozen=True)
class ExportFile:
    filename: str
    mimetype: str
    content: bytes


class ReportExporter(ABC):
    """Exporter interface (Strategy Pattern per output format)."""

    extension: str = ""
    mimetype: str = "application/octet-stream"

    @abstractmethod
    def render(self, report: ReportData, *, language: str, generated_on: str) -> bytes:
        raise NotImplementedError
