"""Paginate every opted-in document in a site directory.

The batch driver walks a source directory, copies files that do not use
pagination into the output directory untouched, and runs a ``PageRunner``
over every HTML file that declares a pagination container. Files are
independent of each other, so reading and paginating run on a thread pool.
"""

import logging
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pagebreak.exceptions import SourceNotFoundError
from pagebreak.runner import PageRunner, SourcePage
from schemas.report import BatchReport, PaginationReport

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.html"


class BatchDriver:
    """Runs pagination across a directory of HTML files.

    Source and output may be the same directory, in which case pages are
    written in place and nothing is copied.

    Example:
        driver = BatchDriver(Path.cwd(), Path("_site"), Path("_site"))
        report = driver.run()

    Attributes:
        working_directory: Directory relative paths are resolved against
        source: Source directory of the site
        output: Output directory for the paginated site
        pattern: Glob pattern selecting HTML files
        workers: Maximum number of worker threads (default: executor default)
    """

    def __init__(
        self,
        working_directory: Path,
        source: Path,
        output: Path,
        pattern: str = DEFAULT_PATTERN,
        workers: int | None = None,
    ):
        self.working_directory = working_directory
        self.source = source
        self.output = output
        self.pattern = pattern
        self.workers = workers

    def full_source_path(self) -> Path:
        """Absolute source directory.

        Raises:
            SourceNotFoundError: If the directory does not exist
        """
        full_source_path = (self.working_directory / self.source).resolve()
        if not full_source_path.is_dir():
            raise SourceNotFoundError(str(full_source_path))
        return full_source_path

    def full_output_path(self) -> Path:
        """Absolute output directory, created if missing."""
        full_output_path = self.working_directory / self.output
        full_output_path.mkdir(parents=True, exist_ok=True)
        return full_output_path.resolve()

    def run(self) -> BatchReport:
        """Copy and paginate the whole source directory.

        Returns:
            BatchReport with one PaginationReport per paginated document
        """
        source = self.full_source_path()
        output = self.full_output_path()
        in_place = source == output
        report = BatchReport(source=str(source), output=str(output))

        files = self.discover_files(source, output)
        pages = self.read_pages([f for f in files if f.match(self.pattern)])
        paginated = [page for page in pages if page.contains_pagination()]
        logger.info(f"Found {len(paginated)} pages with pagination")

        if not in_place:
            paginated_paths = {page.path for page in paginated}
            for path in files:
                if path not in paginated_paths and self._copy_file(source, output, path):
                    report.copied += 1

        runner = PageRunner(source, output)
        for page, file_report in zip(paginated, self.paginate(runner, paginated)):
            report.files.append(file_report)
            if not in_place and not file_report.wrote_pages:
                if self._copy_file(source, output, page.path):
                    report.copied += 1

        return report

    def discover_files(self, source: Path, output: Path) -> list[Path]:
        """Every file under the source, minus a nested output directory."""
        skip_output = output != source and output.is_relative_to(source)
        return sorted(
            path
            for path in source.rglob("*")
            if path.is_file() and not (skip_output and path.is_relative_to(output))
        )

    def read_pages(self, paths: list[Path]) -> list[SourcePage]:
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            return list(executor.map(self._read_page, paths))

    def paginate(self, runner: PageRunner, pages: list[SourcePage]) -> list[PaginationReport]:
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            return list(executor.map(lambda page: self._run_page(runner, page), pages))

    def _read_page(self, path: Path) -> SourcePage:
        page = SourcePage(path)
        try:
            page.read()
        except UnicodeDecodeError as e:
            logger.warning(f"Couldn't decode {path} as UTF-8, copying it unchanged: {e}")
        except OSError as e:
            logger.warning(f"Couldn't read {path}, copying it unchanged: {e}")
        return page

    def _run_page(self, runner: PageRunner, page: SourcePage) -> PaginationReport:
        try:
            return runner.run(page)
        except Exception as e:
            relative_path = page.path.relative_to(runner.source_root).as_posix()
            logger.error(f"Failed to paginate {relative_path}: {e}")
            return PaginationReport(
                source_path=relative_path,
                status="failed",
                errors=[str(e)],
            )

    def _copy_file(self, source: Path, output: Path, path: Path) -> bool:
        relative_path = path.relative_to(source)
        destination = output / relative_path
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(path, destination)
        except OSError as e:
            logger.error(f"Failed to copy {relative_path}: {e}")
            return False
        logger.debug(f"Copied {relative_path}")
        return True
