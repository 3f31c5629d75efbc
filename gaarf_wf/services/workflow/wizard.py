"""
Provisioning wizard.

Walks the operator through setting up a Gaarf workflow in Google Cloud:
picks the GCP project, asks where queries and the Ads API config live,
generates the deploy/run/schedule scripts and optionally runs them.

Every question is asked through ask(), so answers loaded from a previous
run are replayed instead of asked again. External commands run in the
process working directory, which the CLI switches to the project folder.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.interfaces.prompter import IPrompter
from ...core.models.command import CommandOptions
from ...core.models.questions import ConfirmQuestion, ListQuestion, TextQuestion
from ...core.settings import WorkflowSettings
from ...prompting.ask import ask
from ..execution.command_runner import CommandRunner
from ..logging import NullLogger
from ..macros.resolver import MacroResolver
from . import scripts
from .gcp import GcpProjectSelector

BANNER = "Gaarf Workflow"
WELCOME = (
    "Welcome to interactive generator for Gaarf Workflow (Google Ads API Report Fetcher Workflow)",
    "You will be asked a bunch of questions to prepare and initialize your cloud infrastructure",
    "It is best to run this script in a folder that is a parent for your queries",
)
TIPS = (
    ("deploy-scripts.sh", "redeploy queries and google-ads.yaml to GCS"),
    ("deploy-wf.sh", "redeploy Cloud Functions and Workflow"),
    ("run-wf.sh", "execute workflow directly, see arguments inside"),
    ("schedule-wf.sh", "reschedule workflow execution, see arguments inside"),
    ("run-gaarf-*.sh", "scripts for direct query execution via gaarf (via command line)"),
)


def normalize_name(value: str) -> str:
    """Project names use dashes instead of spaces and underscores."""
    return value.replace(" ", "-").replace("_", "-")


def strip_gs_prefix(value: str) -> str:
    return value[len("gs://") :] if value.startswith("gs://") else value


def find_queries_folder(cwd: Path, kind: str) -> str | None:
    """First entry of ``cwd`` whose name contains both ``kind`` and 'queries'."""
    for entry in sorted(p.name for p in cwd.iterdir()):
        if kind in entry and "queries" in entry:
            return entry
    return None


def read_customer_id(config_path: Path) -> str | None:
    """
    Customer id from a google-ads.yaml file.

    Returns:
        ``customer_id`` or ``client_customer_id``, or None if the file is
        missing or defines neither
    """
    if not config_path.is_file():
        return None
    with open(config_path, encoding="utf-8") as f:
        doc = yaml.safe_load(f)
    if not isinstance(doc, dict):
        return None
    value = doc.get("customer_id") or doc.get("client_customer_id")
    return str(value) if value is not None else None


def has_entries(folder: Path) -> bool:
    return folder.is_dir() and any(folder.iterdir())


class ProvisioningWizard:
    """
    Interactive setup of a Gaarf workflow.

    Usage:
        wizard = ProvisioningWizard(cwd, answers, settings, runner, resolver, prompter, presenter)
        answers = await wizard.run()
    """

    def __init__(
        self,
        cwd: Path,
        answers: dict[str, Any],
        settings: WorkflowSettings,
        runner: CommandRunner,
        resolver: MacroResolver,
        prompter: IPrompter,
        presenter: IPresenter,
        logger: ILogger | None = None,
        transcript: ILogger | None = None,
    ) -> None:
        """
        Initialize the wizard.

        Args:
            cwd: Project folder; generated scripts and query folders live here
            answers: Known answers, updated in place with everything asked
            settings: Loaded settings
            runner: Runner for gcloud/gsutil/git and the generated scripts
            resolver: Macro resolver for the query folders
            prompter: Prompter for the operator's answers
            presenter: User-facing output
            logger: Diagnostic logger
            transcript: Debug transcript
        """
        self.cwd = Path(cwd)
        self.answers = answers
        self._settings = settings
        self._runner = runner
        self._resolver = resolver
        self._prompter = prompter
        self._presenter = presenter
        self._logger = logger or NullLogger()
        self._transcript = transcript or NullLogger()
        self._gcp = GcpProjectSelector(runner, prompter, presenter)

    async def _ask(self, *questions: Any) -> dict[str, Any]:
        return await ask(self._prompter, list(questions), self.answers)

    def _write(self, file_name: str, content: str) -> Path:
        return scripts.write_script(self.cwd / file_name, content, self._presenter)

    def _script_command(self, file_name: str) -> str:
        return str(self.cwd / file_name)

    async def run(self) -> dict[str, Any]:
        """
        Run the wizard.

        Returns:
            All answers, including those replayed from the answers file

        Raises:
            GcloudNotFoundError: gcloud is not installed
            GcloudAuthError: gcloud is not authenticated
            ProjectNotFoundError: A manually entered project does not exist
        """
        gcp = self._settings.gcp
        region = gcp.region
        gaarf_folder = gcp.gaarf_folder

        status_log = f"Running create-gaarf-wf in {self.cwd}"
        if self._settings.runner.is_debug:
            self._transcript.info(status_log)
        self._presenter.print_dim(status_log)
        self._presenter.print_banner(BANNER)
        for line in WELCOME:
            self._presenter.print(line)

        project_id = await self._gcp.select_project(self.answers)
        self._logger.info("Using GCP project %s", project_id)

        name = (
            await self._ask(
                TextQuestion(
                    name="name",
                    message='Your project name (spaces/underscores will be converted to "-"):',
                    default=self.cwd.name,
                    transform=normalize_name,
                )
            )
        )["name"]

        paths = await self._ask(
            TextQuestion(
                name="path_to_ads_queries",
                message="Relative path to a folder with your Ads queries:",
                default=find_queries_folder(self.cwd, "ads") or scripts.PATH_ADS_QUERIES,
            ),
            TextQuestion(
                name="path_to_bq_queries",
                message="Relative path to a folder with your BigQuery queries:",
                default=find_queries_folder(self.cwd, "bq") or scripts.PATH_BQ_QUERIES,
            ),
            TextQuestion(
                name="gcs_bucket",
                message="GCP bucket name for queries:",
                default=project_id,
                transform=strip_gs_prefix,
            ),
            TextQuestion(
                name="path_to_googleads_config",
                message="Path to your google-ads.yaml:",
                default="google-ads.yaml",
            ),
            TextQuestion(
                name="custom_ids_query_path",
                message="Sql file path with a query to filter customer accounts (leave empty if not needed)",
                default="",
            ),
        )
        ads_queries = paths["path_to_ads_queries"]
        bq_queries = paths["path_to_bq_queries"]
        googleads_config = paths["path_to_googleads_config"]
        custom_ids_query_path = paths["custom_ids_query_path"]
        gcs_bucket = (paths["gcs_bucket"] or project_id).strip()

        for folder in (self.cwd / ads_queries, self.cwd / bq_queries):
            if not folder.exists():
                folder.mkdir(parents=True)
                self._presenter.print_dim(f"Created '{folder}' folder")

        await self._update_gaarf_repo(gcp.repo_url, gaarf_folder)
        await self._create_bucket(gcs_bucket)

        # deploy-scripts.sh
        custom_query_gcs_path = None
        if custom_ids_query_path:
            if not (self.cwd / custom_ids_query_path).exists():
                self._presenter.print_error(f"Could not find script '{custom_ids_query_path}'")
            custom_query_gcs_path = f"gs://{gcs_bucket}/{name}/get-accounts.sql"
        self._write(
            "deploy-scripts.sh",
            scripts.deploy_scripts_sh(
                gcs_bucket, name, googleads_config, ads_queries, bq_queries, custom_ids_query_path
            ),
        )

        # deploy-wf.sh
        workflow_name = f"{name}-wf"
        function_name = name
        cf_memory = (
            await self._ask(
                ListQuestion(
                    name="cf_memory",
                    message="Memory limit for the Cloud Functions",
                    choices=scripts.CF_MEMORY_CHOICES,
                    default=scripts.CF_MEMORY_DEFAULT,
                )
            )
        )["cf_memory"]
        self._write(
            "deploy-wf.sh",
            scripts.deploy_wf_sh(gaarf_folder, function_name, workflow_name, cf_memory, region),
        )

        ready_to_deploy_scripts = self._check_readiness(
            project_id, ads_queries, bq_queries, googleads_config
        )

        # Parameters for running the workflow
        wf_params = await self._ask(
            TextQuestion(
                name="output_dataset",
                message="BigQuery dataset for ads queries results:",
                default=f"{name}_ads",
            ),
            TextQuestion(
                name="customer_id",
                message="Ads account id (customer id, without dashes):",
                default=self._default_customer_id(googleads_config),
            ),
        )
        output_dataset = wf_params["output_dataset"]
        customer_id = wf_params["customer_id"]

        ads_macro = await self._resolver.resolve(self.cwd / ads_queries, self.answers, "ads_macro")
        bq_macro = await self._resolver.resolve(self.cwd / bq_queries, self.answers, "bq_macro")

        wf_data = scripts.workflow_data(
            name,
            gcs_bucket,
            output_dataset,
            customer_id,
            ads_macro,
            bq_macro,
            customer_ids_query=custom_query_gcs_path,
        )
        self._write("run-wf.sh", scripts.run_wf_sh(workflow_name, wf_data))

        schedule = await self._ask_schedule()
        self._write(
            "schedule-wf.sh",
            scripts.schedule_wf_sh(project_id, region, workflow_name, schedule["cron"], wf_data),
        )

        await self._deploy(ready_to_deploy_scripts)
        if schedule["schedule_wf"]:
            await self._schedule(workflow_name, region, schedule["run_job"])

        for file_name, content in scripts.gaarf_scripts(
            gaarf_folder,
            ads_queries,
            bq_queries,
            customer_id,
            googleads_config,
            project_id,
            output_dataset,
            ads_macro,
            bq_macro,
        ).items():
            self._write(file_name, content)

        self._presenter.print_success("All done")
        self._print_tips()
        return self.answers

    async def _update_gaarf_repo(self, repo_url: str, gaarf_folder: str) -> None:
        """Clone the Gaarf repository, or fast-forward an existing clone."""
        if not (self.cwd / gaarf_folder).exists():
            await self._runner.run(
                f"git clone {repo_url} --depth 1 {gaarf_folder}",
                progress=self._presenter.spinner(
                    f"Cloning Gaarf repository ({repo_url}), please wait..."
                ),
            )
        else:
            await self._runner.run(f"cd {gaarf_folder} && git pull --ff", CommandOptions(silent=True))

    async def _create_bucket(self, gcs_bucket: str) -> None:
        result = await self._runner.run(
            f"gsutil mb -b on gs://{gcs_bucket}",
            CommandOptions(silent=True),
            progress=self._presenter.spinner(f"Creating a GCS bucket {gcs_bucket}"),
        )
        if result.ok:
            return
        already_exists = f"409 A Cloud Storage bucket named '{gcs_bucket}' already exists"
        if already_exists not in result.stderr:
            self._presenter.print_error(f"Could not create a bucket {gcs_bucket}")
            self._presenter.print(result.stderr)

    def _check_readiness(
        self,
        project_id: str,
        ads_queries: str,
        bq_queries: str,
        googleads_config: str,
    ) -> bool:
        """Whether deploy-scripts.sh has something to deploy; warns otherwise."""
        has_ads_queries = has_entries(self.cwd / ads_queries)
        has_bq_queries = has_entries(self.cwd / bq_queries)
        has_adsconfig = (self.cwd / googleads_config).exists()
        if not has_ads_queries or not has_bq_queries:
            self._presenter.print_error(
                f"Please place your ads/bq scripts into '{ads_queries}' and '{bq_queries}' "
                "folders accordingly"
            )
        if not has_adsconfig:
            self._presenter.print_error(
                f"Please put your Ads API config into '{googleads_config}' file"
            )
        return bool(project_id) and has_ads_queries and has_bq_queries and has_adsconfig

    def _default_customer_id(self, googleads_config: str) -> str | None:
        config_path = self.cwd / googleads_config
        try:
            return read_customer_id(config_path)
        except yaml.YAMLError as e:
            self._logger.warning("Could not parse %s: %s", config_path, e)
            self._presenter.print_warning(f"Could not read customer id from '{googleads_config}'")
            return None

    async def _ask_schedule(self) -> dict[str, Any]:
        schedule_wf = (
            await self._ask(
                ConfirmQuestion(
                    name="schedule_wf",
                    message="Do you want to schedule a job for executing workflow:",
                    default=True,
                )
            )
        )["schedule_wf"]
        if not schedule_wf:
            return {"schedule_wf": False, "run_job": False, "cron": scripts.DEFAULT_SCHEDULE_CRON}

        answers = await self._ask(
            TextQuestion(
                name="schedule_time",
                message="Enter time (hh:mm) for job to start:",
                default="00:00",
                validate=scripts.validate_schedule_time,
            ),
            ConfirmQuestion(
                name="run_job",
                message="Do you want to run the job right now",
                default=True,
            ),
        )
        return {
            "schedule_wf": True,
            "run_job": answers["run_job"],
            "cron": scripts.schedule_cron(answers["schedule_time"]),
        }

    async def _deploy(self, ready_to_deploy_scripts: bool) -> None:
        if ready_to_deploy_scripts:
            deploy_scripts = (
                await self._ask(
                    ConfirmQuestion(
                        name="deploy_scripts",
                        message="Do you want to deploy scripts (Ads/BQ) to GCS:",
                        default=True,
                    )
                )
            )["deploy_scripts"]
            if deploy_scripts:
                await self._runner.run(
                    self._script_command("deploy-scripts.sh"), CommandOptions(realtime=True)
                )
            else:
                self._presenter.print_warning(
                    "Please note that before you deploy queries to GCS (deploy-scripts.sh) "
                    "there's no sense in running workflow (it'll fail)"
                )

        deploy_wf = (
            await self._ask(
                ConfirmQuestion(
                    name="deploy_wf",
                    message="Do you want to deploy Cloud components:",
                    default=True,
                )
            )
        )["deploy_wf"]
        if deploy_wf:
            await self._runner.run(
                self._script_command("deploy-wf.sh"),
                progress=self._presenter.spinner("Deploying Cloud components, please wait..."),
            )
        else:
            self._presenter.print_warning(
                "Please note that before you deploy cloud components (deploy-wf.sh) "
                "there's no sense in running a scheduler job"
            )

    async def _schedule(self, workflow_name: str, region: str, run_job: bool) -> None:
        result = await self._runner.run(
            self._script_command("schedule-wf.sh"),
            progress=self._presenter.spinner("Creating a Scheduler Job, please wait..."),
        )
        if result.ok:
            self._presenter.print(
                "Created a Scheduler Job. You can recreate it with different settings "
                "by running schedule-wf.sh"
            )
        if run_job:
            await self._runner.run(
                f"gcloud scheduler jobs run {workflow_name} --location={region}",
                CommandOptions(realtime=True),
            )

    def _print_tips(self) -> None:
        self._presenter.print_warning("Tips for using the generated scripts:")
        for file_name, description in TIPS:
            self._presenter.print(f" - {file_name} - {description}")
