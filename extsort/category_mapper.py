# File-type classification by extension

from pathlib import Path
from typing import Dict, List, Optional, Set
from .utils.logger import get_logger


CATCH_ALL_CATEGORY = "Others"

# Default file categories with extensions, in folder creation order
DEFAULT_CATEGORIES = {
    "Programs": [
        ".exe", ".msi", ".bat", ".sh", ".apk", ".app", ".jar", ".cmd",
        ".gadget", ".wsf", ".deb", ".rpm", ".bin", ".com", ".vbs", ".ps1"
    ],
    "Documents": [
        ".pdf", ".doc", ".docx", ".txt", ".ppt", ".pptx", ".xls", ".xlsx",
        ".odt", ".csv", ".rtf", ".tex", ".epub", ".md", ".log", ".json",
        ".xml", ".yaml", ".yml", ".ini"
    ],
    "Compressed": [
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".iso", ".cab",
        ".arj", ".lzh", ".ace", ".uue", ".tar.gz", ".tar.bz2", ".tar.xz"
    ],
    "Music": [
        ".mp3", ".wav", ".aac", ".flac", ".ogg", ".m4a", ".wma", ".alac",
        ".amr", ".aiff", ".opus", ".mid", ".midi"
    ],
    "Video": [
        ".mp4", ".mkv", ".avi", ".mov", ".wmv", ".flv", ".webm", ".mpeg",
        ".mpg", ".m4v", ".3gp", ".3g2", ".vob", ".ogv", ".rm", ".rmvb",
        ".ts", ".m2ts"
    ],
    "Images": [
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif", ".webp",
        ".svg", ".ico", ".heic", ".raw", ".psd", ".ai", ".indd", ".eps",
        ".jfif", ".apng", ".avif", ".cr2", ".nef", ".orf", ".sr2"
    ],
    CATCH_ALL_CATEGORY: [],
}


class DuplicateExtensionError(ValueError):
    """An extension is declared by more than one category"""

    def __init__(self, extension: str, first: str, second: str):
        super().__init__(
            f"Extension '{extension}' is declared by both '{first}' and '{second}'"
        )
        self.extension = extension
        self.categories = (first, second)


def normalize_extension(extension: Optional[str]) -> str:
    """Lowercase an extension and make sure it starts with a dot"""
    if not extension:
        return ""
    normalized = extension.strip().lower()
    if normalized and not normalized.startswith('.'):
        normalized = '.' + normalized
    return normalized


def file_extension(name: str) -> str:
    """
    Extension of a file name, dot included

    A leading dot does not start an extension (.bashrc has none) and a
    trailing dot is an extension of its own (archive. has '.').
    """
    if name in ('.', '..'):
        return ""
    index = name.rfind('.')
    if index <= 0:
        return ""
    return name[index:]


class CategoryMapper:
    """
    Maps file extensions to category folder names

    The reverse index is built once in the constructor and never modified,
    so a mapper can be shared freely. Lookups are case-insensitive and
    anything unknown lands in the catch-all category.
    """

    def __init__(self, categories: Optional[Dict[str, List[str]]] = None):
        self.logger = get_logger()

        source = DEFAULT_CATEGORIES if categories is None else categories
        self.categories = {name: list(extensions) for name, extensions in source.items()}
        if CATCH_ALL_CATEGORY not in self.categories:
            self.categories[CATCH_ALL_CATEGORY] = []

        self.extension_map = self._build_extension_map()
        self.logger.debug(f"🗂️ Extension index built: {len(self.extension_map)} extensions, "
                          f"{len(self.categories)} categories")

    def _build_extension_map(self) -> Dict[str, str]:
        """Build reverse lookup map: extension -> category"""
        extension_map = {}

        for category, extensions in self.categories.items():
            for ext in extensions:
                normalized_ext = normalize_extension(ext)
                if not normalized_ext:
                    continue

                owner = extension_map.get(normalized_ext)
                if owner is not None and owner != category:
                    raise DuplicateExtensionError(normalized_ext, owner, category)

                extension_map[normalized_ext] = category

        return extension_map

    def get_category_for_extension(self, extension: Optional[str]) -> str:
        """Category for a single extension such as '.PDF' or 'mp3'"""
        return self.extension_map.get(normalize_extension(extension), CATCH_ALL_CATEGORY)

    def get_file_category(self, file_path) -> str:
        """
        Determine the category of a file from its name

        Compound extensions (.tar.gz) are tried before the last suffix.

        Args:
            file_path: Path or name of the file

        Returns:
            Category name, the catch-all category when nothing matches
        """
        name = Path(file_path).name
        suffixes = Path(name).suffixes

        if len(suffixes) >= 2:
            compound_ext = ''.join(suffixes[-2:]).lower()
            if compound_ext in self.extension_map:
                return self.extension_map[compound_ext]

        return self.get_category_for_extension(file_extension(name))

    def get_category_names(self) -> List[str]:
        """Folder names in table order"""
        return list(self.categories)

    def get_all_categories(self) -> Dict[str, List[str]]:
        """
        Get all available categories and their extensions

        Returns:
            Dictionary of category names to extension lists
        """
        return {name: list(extensions) for name, extensions in self.categories.items()}

    def get_supported_extensions(self) -> Set[str]:
        """Every extension present in the index"""
        return set(self.extension_map)
