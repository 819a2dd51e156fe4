# File operations engine - category folders and the single organize pass

import shutil
import time
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from tqdm import tqdm

from .utils.logger import get_logger
from .category_mapper import CategoryMapper, file_extension


class OutcomeStatus(Enum):
    """What happened to a candidate file"""
    MOVED = "moved"
    SKIPPED = "skipped"
    FAILED = "failed"


class ErrorKind(Enum):
    """Failure classes of an organize pass"""
    SETUP = "setup"            # a category folder could not be created, fatal
    COLLISION = "collision"    # destination already exists, file left in place
    MOVE = "move"              # the rename itself failed, file left in place


class FileOutcome:
    """Result for one file considered by the organizer"""

    def __init__(self, source: Path, category: Optional[str], destination: Optional[Path],
                 status: OutcomeStatus, message: str = "",
                 error_kind: Optional[ErrorKind] = None):
        self.source = source
        self.category = category
        self.destination = destination
        self.status = status
        self.message = message
        self.error_kind = error_kind

    @property
    def name(self) -> str:
        return self.source.name

    def __repr__(self):
        return f"FileOutcome({self.name!r}, {self.category!r}, {self.status.value})"


class FolderSetupError:
    """A category folder that could not be created"""

    kind = ErrorKind.SETUP

    def __init__(self, folder: Path, reason: str):
        self.folder = folder
        self.reason = reason

    def __str__(self):
        return f"Error creating directory {self.folder}: {self.reason}"


class FolderSetupResult:
    """Outcome of ensuring every category folder exists"""

    def __init__(self):
        self.created: List[Path] = []
        self.existing: List[Path] = []
        self.error: Optional[FolderSetupError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class OrganizationResult:
    """Results of file organization operation"""

    def __init__(self, root: Optional[Path] = None):
        self.root = root
        self.total_entries = 0
        self.outcomes: List[FileOutcome] = []
        self.folder_setup: Optional[FolderSetupResult] = None
        self.fatal_error: Optional[FolderSetupError] = None
        self.operation_time = 0.0

    def add_outcome(self, outcome: FileOutcome):
        self.outcomes.append(outcome)

    def _with_status(self, status: OutcomeStatus) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == status]

    @property
    def moved(self) -> List[FileOutcome]:
        return self._with_status(OutcomeStatus.MOVED)

    @property
    def skipped(self) -> List[FileOutcome]:
        return self._with_status(OutcomeStatus.SKIPPED)

    @property
    def errors(self) -> List[FileOutcome]:
        return self._with_status(OutcomeStatus.FAILED)

    @property
    def success(self) -> bool:
        """False only when the pass could not start"""
        return self.fatal_error is None

    def get_summary(self) -> Dict:
        """Get operation summary"""
        processed_categories: Dict[str, int] = {}
        for outcome in self.moved:
            processed_categories[outcome.category] = processed_categories.get(outcome.category, 0) + 1

        return {
            "total_entries": self.total_entries,
            "processed_files": len(self.moved),
            "skipped_files": len(self.skipped),
            "error_files": len(self.errors),
            "categories_created": len(self.folder_setup.created) if self.folder_setup else 0,
            "operation_time": round(self.operation_time, 2),
            "processed_categories": processed_categories,
        }


class FileManager:
    """
    Moves the files of one directory into their category folders

    Features:
    - Category folders created up front, a failure stops the pass
    - Single non-recursive pass over the directory snapshot
    - The running program and extensionless files stay where they are
    - Collisions are skipped, never overwritten or renamed
    - Per-file failures are recorded and the pass continues
    """

    def __init__(self, category_mapper: CategoryMapper, self_path: Optional[Path] = None,
                 exclude_paths: Optional[Iterable[Path]] = None):
        self.logger = get_logger()
        self.category_mapper = category_mapper
        self.self_path = self_path
        # Files that must stay put besides the program, e.g. an open log file
        self.exclude_paths = {Path(path).resolve() for path in exclude_paths or ()}

    def ensure_category_folders(self, root: Path) -> FolderSetupResult:
        """
        Create every missing category folder under root

        Stops at the first folder that cannot be created; folders created
        before the failure are kept.
        """
        setup = FolderSetupResult()

        for category in self.category_mapper.get_category_names():
            folder = root / category
            if folder.exists():
                setup.existing.append(folder)
                continue

            try:
                folder.mkdir()
            except OSError as e:
                setup.error = FolderSetupError(folder, e.strerror or str(e))
                self.logger.debug(f"❌ {setup.error}")
                break

            setup.created.append(folder)
            self.logger.debug(f"📁 Created category folder: {folder}")

        return setup

    def organize_by_type(self,
                         root: Path,
                         progress_callback: Optional[Callable[[FileOutcome], None]] = None,
                         show_progress: bool = False) -> OrganizationResult:
        """
        Organize the files directly inside root by their extension

        Args:
            root: Canonical directory to organize
            progress_callback: Called with each FileOutcome as it happens
            show_progress: Draw a tqdm bar over the directory entries

        Returns:
            OrganizationResult with operation details
        """
        root = Path(root)
        result = OrganizationResult(root)
        operation_id = f"organize_type_{int(time.time())}"
        start_time = time.time()

        self.logger.log_operation_start(operation_id, f"Organizing files by type - Root: {root}")

        result.folder_setup = self.ensure_category_folders(root)
        if not result.folder_setup.ok:
            result.fatal_error = result.folder_setup.error
            self.logger.log_operation_error(operation_id, str(result.fatal_error))
            return result

        entries = self._scan_files(root)
        result.total_entries = len(entries)

        for entry in tqdm(entries, desc="Organizing", unit="file", disable=not show_progress):
            outcome = self._organize_entry(root, entry)
            if outcome is None:
                continue

            result.add_outcome(outcome)
            if progress_callback:
                progress_callback(outcome)

        result.operation_time = time.time() - start_time
        self._log_operation_results(operation_id, result)
        return result

    def _scan_files(self, root: Path) -> List[Path]:
        """Snapshot the immediate children of root, sorted by name"""
        return sorted(root.iterdir(), key=lambda path: path.name)

    def _is_excluded(self, path: Path) -> bool:
        """True for the running program and any other protected file"""
        if self.self_path is None and not self.exclude_paths:
            return False
        try:
            resolved = path.resolve()
        except OSError:
            return False
        return resolved == self.self_path or resolved in self.exclude_paths

    def _organize_entry(self, root: Path, entry: Path) -> Optional[FileOutcome]:
        """Move one entry, or return None when it is not a candidate"""
        category = None
        destination = None

        try:
            if not entry.is_file():
                return None

            if self._is_excluded(entry):
                self.logger.debug(f"🔒 Leaving protected file in place: {entry.name}")
                return None

            if not file_extension(entry.name):
                self.logger.debug(f"⏭️ No extension, left in place: {entry.name}")
                return None

            category = self.category_mapper.get_file_category(entry)
            destination = root / category / entry.name

            if destination.exists():
                message = f"Skipping '{entry.name}': file already exists in '{category}' folder."
                self.logger.log_file_action("SKIP", str(entry), str(destination))
                return FileOutcome(entry, category, destination, OutcomeStatus.SKIPPED,
                                   message, ErrorKind.COLLISION)

            shutil.move(str(entry), str(destination))
        except OSError as e:
            message = f"Error moving file '{entry.name}': {e}"
            self.logger.debug(f"❌ {message}")
            return FileOutcome(entry, category, destination, OutcomeStatus.FAILED,
                               message, ErrorKind.MOVE)

        self.logger.log_file_action("MOVE", str(entry), str(destination))
        return FileOutcome(entry, category, destination, OutcomeStatus.MOVED)

    def _log_operation_results(self, operation_id: str, result: OrganizationResult):
        """Log detailed operation results"""
        summary = result.get_summary()

        self.logger.log_operation_success(
            operation_id,
            f"Moved {summary['processed_files']}, skipped {summary['skipped_files']}, "
            f"failed {summary['error_files']} of {summary['total_entries']} entries"
        )
        self.logger.log_stats(summary)
