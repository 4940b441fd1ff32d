"""git-diary - turn recent repository activity into a dated diary.

git-diary reads the HEAD reflog of a local repository for a window of
days, asks Claude to summarize the activity, and writes the result as a
Markdown document.

Usage:
    python -m git_diary
    python -m git_diary --days 1
"""

__version__ = "0.1.0"

from .config import DiaryConfig
from .config.loader import load_config
from .generator import DiaryGenerator
from .models import DiaryContent, HistoryEntry

__all__ = [
    "DiaryConfig",
    "DiaryContent",
    "DiaryGenerator",
    "HistoryEntry",
    "__version__",
    "load_config",
]
