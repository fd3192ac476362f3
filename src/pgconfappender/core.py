import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape

from .constants import DEFAULT_PATH_TEMPLATE, SETTINGS_BLOCK, VERSION_PLACEHOLDER
from .errors import ConfAppenderError
from .models import AppendPlan
from .services.filesystem import FileSystemService
from .services.manifest import ManifestService

console = Console()
logger = logging.getLogger("pgconfappender")


class ConfigAppender:
    """Appends the test-server settings block to a cluster's postgresql.conf."""

    def __init__(
        self,
        version: Optional[str],
        path_template: str = DEFAULT_PATH_TEMPLATE,
        dry_run: bool = False,
        manifest_file: Optional[str] = None,
    ):
        # An absent version is substituted as-is, so the path simply won't exist.
        self.version = "" if version is None else str(version)
        self.path_template = path_template
        self.dry_run = dry_run

        self.filesystem_service = FileSystemService(logger=logger)
        self.manifest_service: Optional[ManifestService] = None
        if manifest_file:
            self.manifest_service = ManifestService(manifest_file=manifest_file, logger=logger)

    def _build_manifest_metadata(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "path_template": self.path_template,
            "dry_run": self.dry_run,
        }

    def build_target_path(self) -> str:
        return self.path_template.replace(VERSION_PLACEHOLDER, self.version)

    def build_plan(self) -> AppendPlan:
        return AppendPlan(
            version=self.version,
            target_path=self.build_target_path(),
            lines=SETTINGS_BLOCK,
        )

    def append_settings(self, plan: AppendPlan) -> int:
        logger.info("Appending %s settings to %s", len(plan.lines), plan.target_path)
        return self.filesystem_service.append_lines(plan.target_path, plan.lines)

    def print_plan(self, plan: AppendPlan):
        console.print(f"[bold blue]Dry run:[/bold blue] would append to {escape(plan.target_path)}")
        for line in plan.lines:
            console.print(line, markup=False, highlight=False)

    def run(self) -> int:
        exit_code = 1
        manifest_status = "failed"
        manifest_error: Optional[str] = None

        try:
            logger.debug("Starting pg-conf-appender for version '%s'", self.version)
            if self.manifest_service:
                self.manifest_service.start_run(self._build_manifest_metadata())

            plan = self.build_plan()
            if self.manifest_service:
                self.manifest_service.set_target(plan.target_path)

            if self.dry_run:
                self.print_plan(plan)
                manifest_status = "dry_run"
            else:
                written = self.append_settings(plan)
                if self.manifest_service:
                    self.manifest_service.set_lines_appended(written)
                console.print(f"[green]Settings appended to {escape(plan.target_path)}.[/green]")
                manifest_status = "success"

            exit_code = 0
            return exit_code

        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            manifest_status = "aborted"
            manifest_error = "Operation cancelled by user."
            return exit_code
        except ConfAppenderError as exc:
            console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
            logger.error(str(exc))
            manifest_error = str(exc)
            return exit_code
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(exc))}")
            logger.exception("Unexpected error")
            manifest_error = str(exc)
            return exit_code
        finally:
            if self.manifest_service:
                self.manifest_service.finalize(manifest_status, error=manifest_error)
