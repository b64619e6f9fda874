"""Size statistics for a minified document."""
from dataclasses import dataclass, field
from typing import List

from webflow_minify.settings import Settings


@dataclass
class Report:
    """Outcome of one pipeline run.

    ``original_size`` is the input file size in bytes as reported by the
    filesystem while ``minified_size`` is the character count of the
    written document. The two only agree for ASCII input.
    """

    original_size: int
    minified_size: int
    output_path: str
    max_chars: int = Settings.MAX_CHARS
    css_warnings: List[str] = field(default_factory=list)

    @property
    def saved(self) -> int:
        return self.original_size - self.minified_size

    @property
    def saved_percent(self) -> str:
        if not self.original_size:
            return "0.0"
        return f"{self.saved / self.original_size * 100:.1f}"

    @property
    def within_limit(self) -> bool:
        return self.minified_size <= self.max_chars

    @property
    def remaining(self) -> int:
        return self.max_chars - self.minified_size

    @property
    def overflow(self) -> int:
        return self.minified_size - self.max_chars

    def render(self) -> List[str]:
        """Return the console report, one entry per line."""
        lines = [
            "✅ Minification complete!",
            "",
            "📊 Results:",
            f"   Original:  {self.original_size:,} characters",
            f"   Minified:  {self.minified_size:,} characters",
            f"   Saved:     {self.saved:,} characters ({self.saved_percent}%)",
            "",
        ]
        if self.within_limit:
            lines.append(
                f"✅ Under Webflow limit! ({self.remaining:,} characters remaining)"
            )
        else:
            lines.append(
                f"⚠️  Still over Webflow limit by {self.overflow:,} characters"
            )
            lines.append("   Consider externalizing CSS or JavaScript to reduce further.")
        lines.append("")
        lines.append(f"📄 Output: {self.output_path}")
        if self.css_warnings:
            lines.append("")
            lines.append("⚠️  CSS Warnings:")
            lines.extend(f"   {warning}" for warning in self.css_warnings)
        return lines
