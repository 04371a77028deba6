"""Scanner package — site discovery and per-page processing."""

from freshness.scanner.orchestrator import ScanOutcome, process_page, scan_site
from freshness.scanner.walker import iter_html_files, url_path_for

__all__ = ["ScanOutcome", "iter_html_files", "process_page", "scan_site", "url_path_for"]
