"""Interactive menu loop."""

import logging
from collections.abc import Callable
from pathlib import Path

from visionfi_cli.core import account
from visionfi_cli.core.analyze import submit_document
from visionfi_cli.core.auth import CLIENT_NOT_INITIALIZED_MESSAGE, verify_authentication
from visionfi_cli.core.poller import interpret_job_response
from visionfi_cli.core.results import CommandResult
from visionfi_cli.core.session import Session
from visionfi_cli.lib.formatters import format_cache_ttl
from visionfi_cli.lib.output import (
    clear_screen,
    display_banner,
    error,
    info,
    menu_option,
    print_dict,
    print_json,
    status_line,
    subheader,
    success,
    title,
    warning,
)
from visionfi_cli.lib.paths import SERVICE_ACCOUNT_KEY_NAME, expand_user_path, get_default_key_path, get_key_dir

from ..workflows.display import display_workflow_menu, workflow_entries

logger = logging.getLogger(__name__)

QUIT = "q"
BACK = "b"


class InteractiveMenu:
    """
    Menu-driven front end over a Session.

    Parameters
    ----------
    session : Session
        Session holding configuration, client and workflow cache.
    prompt : callable, optional
        Reads one line of input, by default ``input``. End of input is
        treated as quitting.
    default_key_path : Path, optional
        Location checked for a service account key at startup, by default
        ``<config dir>/keys/visionfi_service_account.json``.
    """

    def __init__(
        self,
        session: Session,
        prompt: Callable[[str], str] = input,
        default_key_path: Path | None = None,
    ):
        self.session = session
        self.prompt = prompt
        self.default_key_path = default_key_path or get_default_key_path()

    # ------------------------------------------------------------------
    # Input helpers
    # ------------------------------------------------------------------

    def ask(self, message: str) -> str:
        try:
            return self.prompt(f"{message} ").strip()
        except EOFError:
            print()
            return QUIT

    def choose(self) -> str:
        return self.ask("Enter your choice:").lower()

    def pause(self) -> None:
        self.ask("Press Enter to continue...")

    def show(self, result: CommandResult) -> None:
        """Print a result message with the matching symbol."""
        if result.success:
            success(result.message)
        else:
            error(result.message)
            if self.session.debug and result.error is not None:
                info(f"Details: {result.error}")

    def require_client(self) -> bool:
        if self.session.client is None:
            error(CLIENT_NOT_INITIALIZED_MESSAGE)
            self.pause()
            return False
        return True

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    def run(self) -> int:
        """
        Set up the client and run the main menu until the user quits.

        Returns
        -------
        int
            Exit code, always 0.
        """
        display_banner()
        self.setup_client()
        self.main_menu()
        return 0

    def setup_client(self) -> None:
        """
        Build a client from the configured key, falling back to the default key.

        When neither works the user is told where to put a key and may
        enter a path, or leave it blank to configure one later.
        """
        if self.session.config.get("service_account_path"):
            result = self.session.initialize_client()
            if result.success:
                return
            warning(result.message)

        if self.default_key_path.exists():
            result = self.session.initialize_client(str(self.default_key_path))
            if not result.success:
                error(result.message)
                return
            self.session.config["service_account_path"] = str(self.default_key_path)
            try:
                self.session.save()
            except Exception as e:
                logger.warning("Could not save configuration: %s", e)
            success(f"Service account found in {self.default_key_path.parent}!")
            info("Testing authentication...")
            self.show(verify_authentication(self.session.client))
            return

        warning("No service account configured.")
        print()
        subheader("Service Account Setup")
        info("VisionFi requires a service account JSON file to authenticate with the API.")
        print()
        print(f"1. Copy your service account JSON file to: {get_key_dir()}")
        print(f"2. Name the file: {SERVICE_ACCOUNT_KEY_NAME}")
        print("3. Or provide a custom path below")
        print()

        path = self.ask("Enter path to service account JSON file (leave blank to skip):")
        if path and path.lower() != QUIT:
            self.show(account.set_service_account(self.session, path))
        else:
            info("You can configure it later in the Account & Configuration menu.")

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------

    def auth_status(self) -> str:
        if self.session.client is None:
            return "Not Authenticated"
        if verify_authentication(self.session.client).success:
            return "Authenticated"
        return "Not Authenticated"

    def main_menu(self) -> None:
        actions = {
            "1": self.document_analysis_menu,
            "2": self.results_menu,
            "3": self.config_menu,
            "4": self.developer_menu,
        }

        while True:
            clear_screen()
            display_banner()
            config = self.session.config
            status = self.auth_status()
            status_line("Authentication Status", status, status == "Authenticated")
            print(f"API Endpoint: {config.get('api_endpoint')}")
            print(f"Debug Mode: {'Enabled' if config.get('debug_mode') else 'Disabled'}")
            print(f"Test Mode: {'Enabled' if config.get('test_mode') else 'Disabled'}")

            title("MAIN MENU")
            print()
            menu_option("1", "Document Analysis")
            menu_option("2", "Retrieve Results")
            menu_option("3", "Account & Configuration")
            menu_option("4", "Developer Tools")
            print()
            menu_option(QUIT, "Quit")
            print()

            choice = self.choose()
            if choice == QUIT:
                info("Thank you for using VisionFi CLI!")
                return

            action = actions.get(choice)
            if action is None:
                warning("Invalid choice. Please try again.")
                self.pause()
                continue
            action()

    # ------------------------------------------------------------------
    # Document analysis
    # ------------------------------------------------------------------

    def load_workflows(self) -> dict | None:
        """
        Return the workflow response through the session cache.

        A failed refresh falls back to the previously cached response.
        """
        cache = self.session.workflow_cache
        if cache.workflows is None:
            info("Fetching available workflows for the first time...")
            info("This may take a few moments, but future loads will be faster.")

        result = self.session.get_workflows()
        if result.success:
            if self.session.debug:
                if result.payload.get("from_cache"):
                    info("Using cached workflows.")
                else:
                    info(f"Cached {len(workflow_entries(cache.workflows))} workflows.")
            return result.payload["workflows"]

        if self.session.debug:
            warning(result.message)
        return cache.workflows

    def document_analysis_menu(self) -> None:
        if not self.require_client():
            return

        clear_screen()
        display_banner()
        title("DOCUMENT ANALYSIS")
        workflows = self.load_workflows()
        subheader("Select a workflow to analyze a document")
        print()
        entries = display_workflow_menu(workflows)
        print()
        menu_option(BACK, "Back to Main Menu")
        print()

        choice = self.choose()
        if choice in (BACK, QUIT):
            return

        workflow = self._pick(entries, choice)
        if workflow is None:
            warning("Invalid choice.")
            self.pause()
            return

        workflow_key = workflow.get("workflow_key", "")
        file_path = self.ask("Enter path to document file:")
        if not file_path:
            return

        path = expand_user_path(file_path)
        if not path.is_file():
            error(f"File not found: {path}")
            self.pause()
            return

        info(f"Analyzing document with workflow: {workflow_key}")
        try:
            file_data = path.read_bytes()
        except OSError as e:
            error(f"Failed to read file: {e}")
            self.pause()
            return

        result = submit_document(
            self.session.client,
            file_data,
            path.name,
            workflow_key,
            self.session.config,
            self.session.config_manager,
        )
        if result.success:
            success(result.message)
            info(f"Job UUID: {result.payload['uuid']}")
            print()
            info("You can retrieve results using this UUID.")
        else:
            self.show(result)
        self.pause()

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def results_menu(self) -> None:
        if not self.require_client():
            return

        clear_screen()
        display_banner()
        title("RETRIEVE RESULTS")
        subheader("Get analysis results by job UUID")
        print()

        recent = self.session.recent_jobs
        if recent:
            subheader("Recent job UUIDs:")
            for index, uuid in enumerate(recent, start=1):
                menu_option(str(index), uuid)
        else:
            info("No recent jobs found.")
        print()
        menu_option("n", "Enter new UUID")
        menu_option(BACK, "Back to Main Menu")
        print()

        choice = self.choose()
        if choice in (BACK, QUIT):
            return

        if choice == "n":
            job_id = self.ask("Enter job UUID:")
        else:
            job_id = self._pick(recent, choice)
            if job_id is None:
                warning("Invalid choice.")

        if job_id:
            self.check_results(job_id)
        self.pause()

    def check_results(self, job_id: str) -> None:
        """Check a job once and print its status, results or error."""
        info(f"Retrieving results for job: {job_id}")
        try:
            self.session.remember_job(job_id)
        except Exception as e:
            logger.warning("Could not save recent jobs: %s", e)

        try:
            response = self.session.client.get_results(job_id, 0, 1)
        except Exception as e:
            error(f"Failed to retrieve results: {e}")
            return

        result = interpret_job_response(response)
        status = (result.payload or {}).get("status")
        print()
        if status:
            print(f"Status: {status}")

        if not result.success:
            error(result.message)
            print_json(result.error)
        elif "results" in result.payload:
            success(result.message)
            print()
            print_json(result.payload["results"])
        else:
            warning(result.message)

    # ------------------------------------------------------------------
    # Account & configuration
    # ------------------------------------------------------------------

    def config_menu(self) -> None:
        while True:
            clear_screen()
            display_banner()
            config = self.session.config
            default_found = self.default_key_path.exists()

            title("ACCOUNT & CONFIGURATION")
            print()
            print(f"Service Account: {config.get('service_account_path') or 'Not configured'}")
            print(f"API Endpoint: {config.get('api_endpoint')}")
            print(f"Default Key: {'Found' if default_found else 'Not found'} ({self.default_key_path})")
            print(f"Workflow Cache Time: {format_cache_ttl(config.get('workflow_cache_ttl', 0))}")
            print()

            menu_option("1", "Set Service Account Path")
            if default_found:
                menu_option("2", "Use Default Service Account")
            menu_option("3", "Setup Default Service Account Location")
            menu_option("4", "Set API Endpoint")
            menu_option("5", "Test Authentication")
            menu_option("6", "Get Client Info")
            menu_option("7", "Clear Recent UUIDs")
            menu_option("8", "Clear Workflow Cache")
            menu_option("9", "Set Workflow Cache Time")
            print()
            menu_option(BACK, "Back to Main Menu")
            print()

            choice = self.choose()
            if choice in (BACK, QUIT):
                return

            if choice == "1":
                path = self.ask("Enter path to service account JSON file:")
                if path:
                    self.show(account.set_service_account(self.session, path))
            elif choice == "2" and default_found:
                self.show(account.set_service_account(self.session, str(self.default_key_path)))
            elif choice == "3":
                path = self.ask("Enter path of the service account JSON file to copy:")
                if path:
                    self.show(
                        account.setup_default_service_account(
                            self.session, path, self.default_key_path
                        )
                    )
            elif choice == "4":
                endpoint = self.ask(f"Enter API endpoint [{config.get('api_endpoint')}]:")
                if endpoint:
                    self.show(account.set_config_value(self.session, "api_endpoint", endpoint))
            elif choice == "5":
                self.show(verify_authentication(self.session.client))
            elif choice == "6":
                self.show_client_info()
            elif choice == "7":
                self.show(account.clear_recent_jobs(self.session))
            elif choice == "8":
                self.show(account.clear_workflow_cache(self.session))
            elif choice == "9":
                current = format_cache_ttl(config.get("workflow_cache_ttl", 0))
                ttl = self.ask(f"Enter cache time, e.g. 30s, 10m, 2h [{current}]:")
                if ttl:
                    self.show(account.set_cache_ttl(self.session, ttl))
            else:
                warning("Invalid choice. Please try again.")
            self.pause()

    def show_client_info(self) -> None:
        result = account.get_client_info(self.session.client)
        if not result.success:
            self.show(result)
            return

        data = result.payload
        title("CLIENT INFORMATION")
        if isinstance(data, dict):
            print_dict(data)
        else:
            print_json(data)

    # ------------------------------------------------------------------
    # Developer tools
    # ------------------------------------------------------------------

    def developer_menu(self) -> None:
        while True:
            clear_screen()
            display_banner()
            config = self.session.config
            title("DEVELOPER TOOLS")
            print()
            menu_option("1", "Test Authentication")
            menu_option("2", f"Toggle Debug Mode ({'ON' if config.get('debug_mode') else 'OFF'})")
            menu_option("3", f"Toggle Test Mode ({'ON' if config.get('test_mode') else 'OFF'})")
            print()
            menu_option(BACK, "Back to Main Menu")
            print()

            choice = self.choose()
            if choice in (BACK, QUIT):
                return

            if choice == "1":
                self.show(verify_authentication(self.session.client))
            elif choice in ("2", "3"):
                key = "debug_mode" if choice == "2" else "test_mode"
                enabled = not config.get(key)
                result = account.update_config(self.session, key, enabled)
                if result.success:
                    label = "Debug mode" if key == "debug_mode" else "Test mode"
                    success(f"{label} {'enabled' if enabled else 'disabled'}.")
                else:
                    self.show(result)
            else:
                warning("Invalid choice. Please try again.")
            self.pause()

    @staticmethod
    def _pick(items: list, choice: str):
        """Return ``items[choice - 1]`` for a 1-based numeric choice, else None."""
        if not choice.isdigit():
            return None
        index = int(choice) - 1
        if 0 <= index < len(items):
            return items[index]
        return None
