"""
Shell scripts generated by the wizard.

Every builder returns the script text; write_script() puts it on disk and
makes it executable. The scripts stay in the project folder so the operator
can re-run or tweak them later.
"""

from __future__ import annotations

import json
import re
import stat
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ...core.interfaces.presenter import IPresenter

PATH_ADS_QUERIES = "ads-queries"
PATH_BQ_QUERIES = "bq-queries"

CF_MEMORY_CHOICES = ["128MB", "256MB", "512MB", "1024MB", "2048MB", "4096MB", "8192MB"]
CF_MEMORY_DEFAULT = "512MB"
# Gen2 functions need more CPU above 1GB, which `gcloud functions deploy`
# cannot set; such functions are deployed small and resized with `gcloud run`
CF_MEMORY_NEEDS_CPU = {"2048MB", "4096MB", "8192MB"}

DEFAULT_SCHEDULE_CRON = "0 0 * * *"
SCHEDULE_TIME_PATTERN = re.compile(r"\d+(:\d+)*")


def write_script(path: str | Path, content: str, presenter: IPresenter | None = None) -> Path:
    """Write an executable shell script and report it."""
    path = Path(path)
    path.write_text(content, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    if presenter is not None:
        presenter.print_dim(f"Created {path.name}")
    return path


def deploy_scripts_sh(
    gcs_bucket: str,
    name: str,
    googleads_config: str,
    ads_queries: str,
    bq_queries: str,
    custom_ids_query_path: str = "",
) -> str:
    """Script copying queries and google-ads.yaml to Cloud Storage."""
    custom_query_line = ""
    if custom_ids_query_path:
        custom_query_line = f"gsutil -m cp {custom_ids_query_path} $GCS_BASE_PATH/get-accounts.sql"
    lines = [
        "# Deploy Ads and BQ scripts from local folders to Google Cloud Storage.",
        "set -e",
        f"GCS_BUCKET=gs://{gcs_bucket}",
        f"GCS_BASE_PATH=$GCS_BUCKET/{name}",
        "",
        f"gsutil -m cp {googleads_config} $GCS_BASE_PATH/google-ads.yaml",
        custom_query_line,
        "",
        f"gsutil rm -r $GCS_BASE_PATH/{ads_queries}",
        f"gsutil -m cp -R ./{ads_queries}/* $GCS_BASE_PATH/{PATH_ADS_QUERIES}/",
        "",
        f"gsutil rm -r $GCS_BASE_PATH/{bq_queries}",
        f"gsutil -m cp -R ./{bq_queries}/* $GCS_BASE_PATH/{PATH_BQ_QUERIES}/",
        "",
    ]
    return "\n".join(lines)


def cloud_function_memory(memory: str) -> tuple[str, bool]:
    """
    Memory to deploy the function with, and whether it must be resized.

    Returns:
        (deploy_memory, needs_resize)
    """
    if memory in CF_MEMORY_NEEDS_CPU:
        return CF_MEMORY_DEFAULT, True
    return memory, False


def deploy_wf_sh(
    gaarf_folder: str,
    function_name: str,
    workflow_name: str,
    memory: str,
    region: str,
) -> str:
    """Script deploying the Cloud Functions and the Cloud Workflow."""
    deploy_memory, needs_resize = cloud_function_memory(memory)
    resize = ""
    if needs_resize:
        resize = (
            f"gcloud run services update {function_name} --region {region} "
            f"--cpu 1 --memory={memory.replace('MB', 'Mi')}"
        )
    lines = [
        "# Deploy Cloud Functions and Cloud Workflow",
        "set -e",
        f"cd ./{gaarf_folder}",
        "git pull --ff",
        "cd ./gcp/functions",
        f"./setup.sh --name {function_name} --memory {deploy_memory} --region {region}",
        resize,
        "cd ../workflow",
        f"./setup.sh --name {workflow_name} --region {region}",
        "",
    ]
    return "\n".join(lines)


def workflow_data(
    name: str,
    gcs_bucket: str,
    dataset: str,
    customer_id: str,
    ads_macro: Mapping[str, str],
    bq_macro: Mapping[str, str],
    customer_ids_query: str | None = None,
) -> dict[str, Any]:
    """Arguments passed to the Cloud Workflow on every execution."""
    data: dict[str, Any] = {
        "cloud_function": name,
        "gcs_bucket": gcs_bucket,
        "ads_queries_path": f"{name}/{PATH_ADS_QUERIES}/",
        "bq_queries_path": f"{name}/{PATH_BQ_QUERIES}/",
        "dataset": dataset,
        "cid": customer_id,
        "ads_config_path": f"gs://{gcs_bucket}/{name}/google-ads.yaml",
    }
    if customer_ids_query:
        data["customer_ids_query"] = customer_ids_query
    # TODO: ask for the BigQuery dataset location instead of relying on the 'us' default
    data["bq_dataset_location"] = ""
    data["ads_macro"] = dict(ads_macro)
    data["bq_macro"] = dict(bq_macro)
    data["bq_sql"] = {}
    return data


def run_wf_sh(workflow_name: str, data: Mapping[str, Any]) -> str:
    """Script executing the workflow once."""
    return f"gcloud workflows run {workflow_name} \\\n  --data='{json.dumps(data, indent=2)}'\n"


def schedule_cron(schedule_time: str) -> str:
    """Cron expression running daily at ``hh[:mm]``."""
    parts = schedule_time.split(":")
    minutes = parts[1] if len(parts) > 1 else "0"
    return f"{minutes} {parts[0]} * * *"


def validate_schedule_time(value: str) -> str | None:
    """Validator for the schedule time question."""
    if not SCHEDULE_TIME_PATTERN.search(value):
        return "Please use the format 00:00"
    return None


def schedule_wf_sh(
    project_id: str,
    region: str,
    workflow_name: str,
    cron: str,
    data: Mapping[str, Any],
) -> str:
    """Script (re)creating the Cloud Scheduler job that runs the workflow."""
    escaped_data = json.dumps(data, indent=2).replace('"', '\\"')
    lines = [
        "# Create Scheduler Job to execute Cloud Workflow",
        f"PROJECT_ID={project_id}",
        'PROJECT_NUMBER=$(gcloud projects describe $PROJECT_ID --format="csv(projectNumber)" | tail -n 1)',
        "# by default Cloud Workflows run under the Compute Engine default service account:",
        "SERVICE_ACCOUNT=$PROJECT_NUMBER-compute@developer.gserviceaccount.com",
        "",
        f"REGION={region}",
        f"WORKFLOW_NAME={workflow_name}",
        "JOB_NAME=$WORKFLOW_NAME",
        "",
        f"data='{escaped_data}'",
        "",
        "gcloud scheduler jobs delete $JOB_NAME --location $REGION --quiet",
        "",
        "gcloud scheduler jobs create http $JOB_NAME \\",
        f'  --schedule="{cron}" \\',
        '  --uri="https://workflowexecutions.googleapis.com/v1/projects/$PROJECT_ID'
        '/locations/$REGION/workflows/$WORKFLOW_NAME/executions" \\',
        "  --location=$REGION \\",
        '  --message-body="{\\"argument\\": \\"$data\\"}" \\',
        '  --oauth-service-account-email="$SERVICE_ACCOUNT" \\',
        '  --time-zone="Etc/UTC"',
        "",
        "# time zones: https://en.wikipedia.org/wiki/List_of_tz_database_time_zones",
        "",
    ]
    return "\n".join(lines)


def macro_cli_args(macros: Mapping[str, str]) -> str:
    """Macro values as gaarf command line options."""
    return " ".join(f"--macro.{name}={value}" for name, value in macros.items())


def gaarf_scripts(
    gaarf_folder: str,
    ads_queries: str,
    bq_queries: str,
    customer_id: str,
    googleads_config: str,
    project_id: str,
    dataset: str,
    ads_macro: Mapping[str, str],
    bq_macro: Mapping[str, str],
) -> dict[str, str]:
    """Scripts running gaarf directly from the command line, by file name."""
    ads_args = macro_cli_args(ads_macro)
    bq_args = macro_cli_args(bq_macro)
    ads_base = (
        f"{gaarf_folder}/js/gaarf {ads_queries}/*.sql --account={customer_id} "
        f"--ads-config={googleads_config}"
    )
    return {
        "run-gaarf-console.sh": f"{ads_base} --output=console --console.transpose=always {ads_args}\n",
        "run-gaarf.sh": (
            f"{ads_base} --output=bq --bq.project={project_id} --bq.dataset={dataset} {ads_args}\n"
        ),
        "run-gaarf-bq.sh": f"{gaarf_folder}/js/gaarf-bq {bq_queries}/*.sql --project={project_id} {bq_args}\n",
    }
