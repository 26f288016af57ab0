"""Tests for the pattern compiler and its handlers.

Covers tokenization into Verbatim/Derived renderers, verbatim merging,
error reporting (stray '%' and unknown directives), and position helpers.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from strftimeengine import (
    DirectiveNotFoundError,
    DirectiveTable,
    PatternCompileError,
    Renderer,
    StrayEscapeError,
    UnknownDirectiveError,
    get_default_table,
    verbatim,
)
from strftimeengine.core.renderers import CombinedVerbatim, Derived, Verbatim
from strftimeengine.diagnostics import DiagnosticCode
from strftimeengine.syntax import (
    RendererExecutor,
    RendererListBuilder,
    column_offset,
    compile_pattern,
    line_offset,
    span_at,
)

TS = datetime(2009, 11, 10, 23, 0, 0, tzinfo=UTC)


def _compile(pattern: str, *, merge: bool = True) -> list[Renderer]:
    builder = RendererListBuilder(merge=merge)
    compile_pattern(builder, pattern, get_default_table())
    return builder.renderers


# ============================================================================
# TOKENIZATION
# ============================================================================


class TestTokenization:
    """Splitting patterns into renderers."""

    def test_empty_pattern(self) -> None:
        """Empty pattern compiles to nothing."""
        assert _compile("") == []

    def test_literal_only(self) -> None:
        """Pattern without '%' is one Verbatim."""
        assert _compile("hello world") == [Verbatim("hello world")]

    def test_directive_only(self) -> None:
        """A single directive compiles to its table renderer."""
        renderers = _compile("%Y")
        assert renderers == [get_default_table().lookup("Y")]

    def test_literal_directive_literal(self) -> None:
        """Text around a directive becomes separate Verbatims."""
        renderers = _compile("<%Y>")
        assert renderers[0] == Verbatim("<")
        assert isinstance(renderers[1], Derived)
        assert renderers[2] == Verbatim(">")

    def test_adjacent_directives(self) -> None:
        """No empty Verbatim is emitted between adjacent directives."""
        renderers = _compile("%H%M", merge=False)
        assert len(renderers) == 2
        assert all(isinstance(r, Derived) for r in renderers)

    def test_escape_directive_is_verbatim(self) -> None:
        """'%%' maps to a Verbatim percent sign."""
        assert _compile("%%", merge=False) == [Verbatim("%")]

    def test_newline_and_tab_directives(self) -> None:
        """'%n' and '%t' are verbatim whitespace."""
        assert _compile("%n%t", merge=False) == [Verbatim("\n"), Verbatim("\t")]

    def test_percent_in_middle(self) -> None:
        """'%%' between literal runs splits them without merging."""
        assert _compile("a%%b", merge=False) == [Verbatim("a"), Verbatim("%"), Verbatim("b")]

    def test_unicode_literals_preserved(self) -> None:
        """Non-ASCII literal text passes through unchanged."""
        assert _compile("日付: ") == [Verbatim("日付: ")]


# ============================================================================
# MERGING
# ============================================================================


class TestMerging:
    """Adjacent verbatim renderers collapse into one CombinedVerbatim."""

    def test_literal_escape_literal_merges(self) -> None:
        """'a%%b' becomes a single combined entry."""
        assert _compile("a%%b") == [CombinedVerbatim("a%b")]

    def test_escape_run_merges(self) -> None:
        """Runs of verbatim directives merge."""
        assert _compile("%%%n%t") == [CombinedVerbatim("%\n\t")]

    def test_single_literal_not_wrapped(self) -> None:
        """A lone Verbatim stays a plain Verbatim."""
        assert _compile("abc") == [Verbatim("abc")]

    def test_derived_breaks_merge(self) -> None:
        """Derived renderers are never merged."""
        renderers = _compile("a%%%Yb%%")
        assert renderers[0] == CombinedVerbatim("a%")
        assert isinstance(renderers[1], Derived)
        assert renderers[2] == CombinedVerbatim("b%")

    def test_no_two_adjacent_mergeable_entries(self) -> None:
        """After merging, mergeable entries are never adjacent."""
        renderers = _compile("x%%y%n%Y%t%tz%H%%")
        for left, right in zip(renderers, renderers[1:], strict=False):
            assert not (getattr(left, "mergeable", False) and getattr(right, "mergeable", False))

    def test_merge_disabled_keeps_entries(self) -> None:
        """merge=False keeps every emitted renderer."""
        assert _compile("a%%b", merge=False) == [Verbatim("a"), Verbatim("%"), Verbatim("b")]

    def test_custom_mergeable_renderer_merges(self) -> None:
        """verbatim() renderers registered under custom keys merge too."""
        table = get_default_table().copy()
        table.set("q", verbatim("Q"))
        builder = RendererListBuilder()
        compile_pattern(builder, "[%q]", table)
        assert builder.renderers == [CombinedVerbatim("[Q]")]

    def test_merged_output_matches_unmerged(self) -> None:
        """Merging does not change rendered output."""
        pattern = "a%%b %Y%n%%c"
        merged = "".join(r.render([], TS)[0] for r in _compile(pattern))
        unmerged = "".join(r.render([], TS)[0] for r in _compile(pattern, merge=False))
        assert merged == unmerged == "a%b 2009\n%c"


# ============================================================================
# EXECUTOR
# ============================================================================


class TestRendererExecutor:
    """One-shot rendering handler."""

    def test_renders_immediately(self) -> None:
        """Each renderer is applied as it is emitted."""
        executor = RendererExecutor(TS)
        compile_pattern(executor, "%Y-%m-%d", get_default_table())
        assert executor.getvalue() == "2009-11-10"

    def test_partial_output_on_error(self) -> None:
        """Output rendered before an error stays in the executor's buffer."""
        executor = RendererExecutor(TS)
        with pytest.raises(UnknownDirectiveError):
            compile_pattern(executor, "%Y %Q", get_default_table())
        assert executor.getvalue() == "2009 "


# ============================================================================
# ERRORS
# ============================================================================


class TestStrayEscape:
    """Pattern ending with a lone '%'."""

    @pytest.mark.parametrize(
        ("pattern", "position"),
        [("%", 0), ("100%", 3), ("%Y%", 2), ("%%%", 2)],
    )
    def test_raises_with_position(self, pattern: str, position: int) -> None:
        """StrayEscapeError carries the offset of the trailing '%'."""
        with pytest.raises(StrayEscapeError) as exc_info:
            _compile(pattern)
        err = exc_info.value
        assert err.position == position
        assert err.pattern == pattern
        assert isinstance(err, PatternCompileError)

    def test_message_mentions_position(self) -> None:
        """Message names the stray '%' and where it is."""
        with pytest.raises(StrayEscapeError, match=r"Stray % at the end of pattern at position 3"):
            _compile("100%")

    def test_diagnostic(self) -> None:
        """Diagnostic carries code and a 1-character span."""
        with pytest.raises(StrayEscapeError) as exc_info:
            _compile("ab%")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.STRAY_ESCAPE
        assert diagnostic.span is not None
        assert (diagnostic.span.start, diagnostic.span.end) == (2, 3)
        assert (diagnostic.span.line, diagnostic.span.column) == (1, 3)

    def test_escaped_percent_at_end_is_fine(self) -> None:
        """'%%' at the end is a complete escape, not a stray."""
        assert _compile("100%%") == [CombinedVerbatim("100%")]


class TestUnknownDirective:
    """'%<char>' with no table entry."""

    def test_raises_with_directive_and_position(self) -> None:
        """Error names the offending character and offset."""
        with pytest.raises(UnknownDirectiveError) as exc_info:
            _compile("%Y-%Q")
        err = exc_info.value
        assert err.directive == "Q"
        assert err.position == 3
        assert err.pattern == "%Y-%Q"

    def test_cause_is_lookup_failure(self) -> None:
        """The table lookup failure is chained as __cause__."""
        with pytest.raises(UnknownDirectiveError) as exc_info:
            _compile("%Q")
        cause = exc_info.value.__cause__
        assert isinstance(cause, DirectiveNotFoundError)
        assert cause.directive == "Q"

    def test_message(self) -> None:
        """Message names the directive."""
        with pytest.raises(UnknownDirectiveError, match=r"Unknown directive '%Q'"):
            _compile("%Q")

    def test_diagnostic_span_covers_pair(self) -> None:
        """Span covers the '%' and the directive character."""
        with pytest.raises(UnknownDirectiveError) as exc_info:
            _compile("ab\n%Q")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.UNKNOWN_DIRECTIVE
        assert diagnostic.span is not None
        assert (diagnostic.span.start, diagnostic.span.end) == (3, 5)
        assert (diagnostic.span.line, diagnostic.span.column) == (2, 1)

    def test_space_after_percent_is_unknown(self) -> None:
        """'% ' is not a directive in the default table."""
        with pytest.raises(UnknownDirectiveError) as exc_info:
            _compile("50% off")
        assert exc_info.value.directive == " "

    def test_first_error_wins(self) -> None:
        """Compilation aborts at the first problem."""
        with pytest.raises(UnknownDirectiveError) as exc_info:
            _compile("%Q%")
        assert exc_info.value.position == 0

    def test_empty_table_rejects_everything(self) -> None:
        """With an empty table, even '%%' is unknown."""
        builder = RendererListBuilder()
        with pytest.raises(UnknownDirectiveError):
            compile_pattern(builder, "%%", DirectiveTable())

    def test_prefix_emitted_before_error(self) -> None:
        """Renderers before the failing directive were already handed over."""
        builder = RendererListBuilder()
        with pytest.raises(UnknownDirectiveError):
            compile_pattern(builder, "abc%Q", get_default_table())
        assert builder.renderers == [Verbatim("abc")]


# ============================================================================
# POSITIONS
# ============================================================================


class TestPositions:
    """Offset to line/column conversion."""

    def test_line_offset(self) -> None:
        """Counts newlines before the offset."""
        source = "%Y\n%m\n%d"
        assert line_offset(source, 0) == 0
        assert line_offset(source, 3) == 1
        assert line_offset(source, 6) == 2

    def test_column_offset(self) -> None:
        """Counts characters since the last newline."""
        assert column_offset("date: %Q", 6) == 6
        assert column_offset("a\n%Q", 2) == 0

    def test_offsets_clamp_to_source_length(self) -> None:
        """Offsets past the end are clamped."""
        assert line_offset("a\nb", 100) == 1
        assert column_offset("a\nb", 100) == 1

    @pytest.mark.parametrize("func", [line_offset, column_offset])
    def test_negative_offset_rejected(self, func) -> None:  # type: ignore[no-untyped-def]
        """Negative offsets raise ValueError."""
        with pytest.raises(ValueError, match=">= 0"):
            func("abc", -1)

    def test_span_at_clamps_end(self) -> None:
        """Span end never exceeds the source length."""
        span = span_at("ab%", 2, 2)
        assert (span.start, span.end, span.line, span.column) == (2, 3, 1, 3)
