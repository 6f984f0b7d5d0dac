"""
Diagnostic/warning system for contract-specification ingestion.

Collects and reports warnings about specification entries that were
skipped or narrowed while building function selectors. Helps developers
see where a selector list differs from the source ABI.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for specification diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    source: str = ''
    index: Optional[int] = None
    construct: str = ''  # e.g., 'event', 'outputs'

    def __str__(self) -> str:
        location = self.source
        if self.index is not None:
            location = f'{location}#{self.index}'
        if location:
            return f'[{self.severity.value}] {location}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class SpecificationDiagnostics:
    """
    Collects diagnostics while contract specification entries are parsed.

    Usage:
        diag = SpecificationDiagnostics()
        selectors = parse_specification(entries, diagnostics=diag)
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def infos(self) -> List[Diagnostic]:
        """Get only info-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

    # =========================================================================
    # SPECIFIC DIAGNOSTIC METHODS
    # =========================================================================

    def warn_outputs_narrowed(
        self,
        function_name: str,
        output_count: int,
        source: str = '',
        index: Optional[int] = None,
    ) -> None:
        """Warn that outputs beyond the first were dropped from a selector."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Function "{function_name}" declares {output_count} outputs; '
                    f'only the first is kept.',
            source=source,
            index=index,
            construct='outputs',
        ))

    def info_entry_ignored(
        self,
        kind: str,
        source: str = '',
        index: Optional[int] = None,
    ) -> None:
        """Info that an entry other than a function or fallback was skipped."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'Entry of type "{kind}" ignored.',
            source=source,
            index=index,
            construct=kind or 'unknown',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def _warnings_by_construct(self) -> Dict[str, List[Diagnostic]]:
        grouped: Dict[str, List[Diagnostic]] = {}
        for w in self.warnings:
            grouped.setdefault(w.construct or 'other', []).append(w)
        return dict(sorted(grouped.items()))

    def print_summary(self, file=None) -> None:
        """Print warnings grouped by construct to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        grouped = self._warnings_by_construct()
        if grouped:
            print(f'\nSpecification warnings ({len(self.warnings)}):', file=file)
            for construct, diags in grouped.items():
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        # Info entries are listed only in verbose mode
        infos = self.infos
        if infos and self._verbose:
            print(f'\nSpecification info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a one-line summary of all warnings."""
        grouped = self._warnings_by_construct()
        if not grouped:
            return 'No specification warnings.'
        parts = [f'{len(diags)} {construct}' for construct, diags in grouped.items()]
        return f'Specification warnings: {", ".join(parts)}'
