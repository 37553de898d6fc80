"""
Anuvad - on-demand translation for dynamic content.

Lazy model loading with accelerator-to-CPU fallback, a per-text,
per-language cache, batch translation that keeps input order, and a
static dictionary for curated UI strings.
"""

__version__ = "0.1.0"
