"""
Presentation sessions for font analysis and repair.

A session owns exactly one opened deck plus the visible-font set produced by
the last analysis. Sessions are addressed by an explicit id so several decks
can be worked on side by side without shared state.
"""

import asyncio
import logging
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple, Union

from .analyzer import analyze_fonts
from .errors import (
    ArgumentError,
    InvalidSessionStateError,
    OperationCancelledError,
    SessionNotFoundError,
)
from .models import FontUsageLocation, PptFontAnalyzeResult
from .mutator import remove_locations, replace_font
from .writer import load_presentation, save_presentation

logger = logging.getLogger(__name__)


def _require_name(value: Any, what: str) -> str:
    if value is None or not str(value).strip():
        raise ArgumentError(f"{what} must not be empty")
    return str(value)


class PresentationSession:
    """Holds one opened deck and the cache derived from analyzing it.

    Operations on a session are serialized with an asyncio.Lock. After any
    mutation that changes the deck the analysis is re-run so the cached
    visible fonts always describe the in-memory document.
    """

    def __init__(self, session_id: Optional[str] = None):
        self.session_id: str = session_id or uuid.uuid4().hex
        self.path: Optional[Path] = None
        self._prs: Any = None
        self._last_result: Optional[PptFontAnalyzeResult] = None
        self._visible_fonts: Optional[Set[str]] = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._prs is not None

    @property
    def is_analyzed(self) -> bool:
        return self._visible_fonts is not None

    @property
    def visible_fonts(self) -> FrozenSet[str]:
        """Casefolded names of fonts visibly used at the last analysis."""
        return frozenset(self._visible_fonts or ())

    @property
    def last_result(self) -> Optional[PptFontAnalyzeResult]:
        return self._last_result

    def _require_open(self) -> Any:
        if self._prs is None:
            raise InvalidSessionStateError("No PPT file is open. Call open first.")
        return self._prs

    async def _run_analysis(self, prs: Any) -> Tuple[PptFontAnalyzeResult, Set[str]]:
        """Run analyze_fonts in a worker thread that outlives a cancelled caller.

        On cancellation the worker is told to stop and awaited before the
        CancelledError propagates, so the caller's lock is only released once
        the thread no longer touches the deck. The cache is dropped since it
        may no longer describe the document.
        """
        cancel_event = threading.Event()
        worker = asyncio.ensure_future(asyncio.to_thread(analyze_fonts, prs, cancel_event))
        try:
            return await asyncio.shield(worker)
        except asyncio.CancelledError:
            cancel_event.set()
            self._last_result = None
            self._visible_fonts = None
            try:
                await worker
            except OperationCancelledError:
                logger.info("Font analysis cancelled (session %s)", self.session_id)
            raise

    async def _refresh_analysis(self) -> None:
        self._last_result, self._visible_fonts = await self._run_analysis(self._prs)

    def _validate_replacement(self, to_font: str) -> None:
        if self._visible_fonts is None:
            raise InvalidSessionStateError("Fonts have not been analyzed. Call analyze first.")
        if to_font.casefold() not in self._visible_fonts:
            raise ArgumentError(f"Replacement font '{to_font}' not found among analyzed visible fonts")

    async def open(self, path: Union[str, Path]) -> None:
        """Load a deck, discarding any previously opened one and its cache."""
        path = Path(_require_name(path, "File path"))

        async with self._lock:
            self._prs = None
            self._last_result = None
            self._visible_fonts = None
            self.path = None

            self._prs = await asyncio.to_thread(load_presentation, path)
            self.path = path
            logger.info("PPT file opened: %s (session %s)", path, self.session_id)

    async def analyze(self) -> PptFontAnalyzeResult:
        """Classify fonts in the open deck and cache the visible-font set."""
        async with self._lock:
            prs = self._require_open()
            result, visible_fonts = await self._run_analysis(prs)
            self._last_result = result
            self._visible_fonts = visible_fonts
            logger.info("Font analysis completed: %s", result.summary())
            return result

    async def remove_locations(self, locations: Optional[Iterable[FontUsageLocation]]) -> int:
        """Remove shapes at the given locations; missing ones are skipped."""
        async with self._lock:
            prs = self._require_open()
            removed = remove_locations(prs, locations)
            if removed and self.is_analyzed:
                await self._refresh_analysis()
            return removed

    async def replace_font(self, from_font: str, to_font: str) -> int:
        """Replace from_font with to_font on every run of the deck.

        to_font must be one of the visibly used fonts of the last analysis.
        """
        from_font = _require_name(from_font, "Font to replace")
        to_font = _require_name(to_font, "Replacement font")

        async with self._lock:
            prs = self._require_open()
            self._validate_replacement(to_font)
            replaced = replace_font(prs, from_font, to_font)
            if replaced:
                await self._refresh_analysis()
            return replaced

    async def apply_fixes(
        self,
        replacement_font: Optional[str],
        fonts_to_replace: Optional[Iterable[str]],
        locations: Optional[Iterable[FontUsageLocation]],
    ) -> Tuple[int, int]:
        """Remove locations and fold fonts into replacement_font in one batch.

        All arguments are validated before the deck is touched.

        Returns:
            Tuple of (shapes removed, runs replaced)
        """
        fonts: List[str] = [_require_name(font, "Font to replace") for font in (fonts_to_replace or [])]
        locations = list(locations or [])

        async with self._lock:
            prs = self._require_open()
            if fonts:
                replacement_font = _require_name(replacement_font, "Replacement font")
                self._validate_replacement(replacement_font)

            removed = remove_locations(prs, locations)
            replaced = 0
            for font in fonts:
                count = replace_font(prs, font, replacement_font)
                logger.debug("Replaced '%s' with '%s' in %d runs", font, replacement_font, count)
                replaced += count

            if (removed or replaced) and self.is_analyzed:
                await self._refresh_analysis()
            return removed, replaced

    async def save(self, output_path: Union[str, Path]) -> Path:
        """Write the in-memory deck to output_path."""
        output_path = Path(_require_name(output_path, "Output path"))

        async with self._lock:
            prs = self._require_open()
            return await asyncio.to_thread(save_presentation, prs, output_path)


class SessionRegistry:
    """Maps session ids to open PresentationSession objects."""

    def __init__(self):
        self._sessions: Dict[str, PresentationSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create(self) -> PresentationSession:
        session = PresentationSession()
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: Optional[str]) -> PresentationSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(f"Unknown session id: {session_id}") from None

    def close(self, session_id: str) -> None:
        self.get(session_id)
        del self._sessions[session_id]
        logger.info("Session closed: %s", session_id)
