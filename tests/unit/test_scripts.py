"""
Unit tests for the generated shell scripts.
"""

import json
import os

import pytest

from gaarf_wf.services.workflow import scripts


class TestWriteScript:
    """Tests for writing scripts to disk."""

    def test_script_is_executable_and_reported(self, tmp_path, presenter):
        path = scripts.write_script(tmp_path / "run.sh", "echo hi\n", presenter)

        assert path.read_text() == "echo hi\n"
        assert os.access(path, os.X_OK)
        assert presenter.of_kind("dim") == ["Created run.sh"]


class TestDeployScripts:
    """Tests for deploy-scripts.sh."""

    def test_copies_config_and_queries(self):
        content = scripts.deploy_scripts_sh("bucket", "proj", "google-ads.yaml", "ads", "bq")

        assert "GCS_BUCKET=gs://bucket" in content
        assert "GCS_BASE_PATH=$GCS_BUCKET/proj" in content
        assert "gsutil -m cp google-ads.yaml $GCS_BASE_PATH/google-ads.yaml" in content
        assert "gsutil -m cp -R ./ads/* $GCS_BASE_PATH/ads-queries/" in content
        assert "gsutil -m cp -R ./bq/* $GCS_BASE_PATH/bq-queries/" in content
        assert "get-accounts.sql" not in content

    def test_custom_ids_query(self):
        content = scripts.deploy_scripts_sh("b", "p", "g.yaml", "ads", "bq", "accounts.sql")

        assert "gsutil -m cp accounts.sql $GCS_BASE_PATH/get-accounts.sql" in content


class TestDeployWf:
    """Tests for deploy-wf.sh and Cloud Function memory."""

    def test_small_memory_deployed_directly(self):
        content = scripts.deploy_wf_sh("ads-api-fetcher", "proj", "proj-wf", "1024MB", "us-central1")

        assert "./setup.sh --name proj --memory 1024MB --region us-central1" in content
        assert "./setup.sh --name proj-wf --region us-central1" in content
        assert "gcloud run services update" not in content

    def test_large_memory_resized_after_deploy(self):
        content = scripts.deploy_wf_sh("ads-api-fetcher", "proj", "proj-wf", "4096MB", "europe-west1")

        assert "--memory 512MB" in content
        assert (
            "gcloud run services update proj --region europe-west1 --cpu 1 --memory=4096Mi"
            in content
        )

    @pytest.mark.parametrize("memory", ["2048MB", "4096MB", "8192MB"])
    def test_memory_needing_cpu(self, memory):
        assert scripts.cloud_function_memory(memory) == ("512MB", True)

    def test_memory_not_needing_cpu(self):
        assert scripts.cloud_function_memory("256MB") == ("256MB", False)


class TestWorkflowData:
    """Tests for the workflow arguments."""

    def test_paths_derived_from_name_and_bucket(self):
        data = scripts.workflow_data("proj", "bucket", "proj_ads", "123", {"a": "1"}, {})

        assert data["cloud_function"] == "proj"
        assert data["ads_queries_path"] == "proj/ads-queries/"
        assert data["bq_queries_path"] == "proj/bq-queries/"
        assert data["ads_config_path"] == "gs://bucket/proj/google-ads.yaml"
        assert data["cid"] == "123"
        assert data["ads_macro"] == {"a": "1"}
        assert "customer_ids_query" not in data

    def test_customer_ids_query(self):
        data = scripts.workflow_data("p", "b", "d", "1", {}, {}, customer_ids_query="gs://b/p/q.sql")

        assert data["customer_ids_query"] == "gs://b/p/q.sql"

    def test_run_wf_embeds_json(self):
        data = scripts.workflow_data("p", "b", "d", "1", {}, {})
        content = scripts.run_wf_sh("p-wf", data)

        assert content.startswith("gcloud workflows run p-wf \\\n")
        embedded = content.split("--data='", 1)[1].rsplit("'", 1)[0]
        assert json.loads(embedded) == data


class TestSchedule:
    """Tests for scheduling."""

    def test_cron_hours_and_minutes(self):
        assert scripts.schedule_cron("07:45") == "45 07 * * *"

    def test_cron_hours_only(self):
        assert scripts.schedule_cron("3") == "0 3 * * *"

    def test_validate_schedule_time(self):
        assert scripts.validate_schedule_time("12:00") is None
        assert scripts.validate_schedule_time("noon") == "Please use the format 00:00"

    def test_schedule_script(self):
        data = {"cid": "1"}
        content = scripts.schedule_wf_sh("my-proj", "us-central1", "p-wf", "0 5 * * *", data)

        assert "PROJECT_ID=my-proj" in content
        assert "WORKFLOW_NAME=p-wf" in content
        assert '--schedule="0 5 * * *" \\' in content
        assert 'data=\'{\n  \\"cid\\": \\"1\\"\n}\'' in content
        assert "gcloud scheduler jobs delete $JOB_NAME --location $REGION --quiet" in content


class TestGaarfScripts:
    """Tests for the direct gaarf scripts."""

    def test_macro_cli_args(self):
        assert scripts.macro_cli_args({"a": "1", "b": "x y"}) == "--macro.a=1 --macro.b=x y"

    def test_scripts(self):
        generated = scripts.gaarf_scripts(
            "ads-api-fetcher",
            "ads",
            "bq",
            "123",
            "google-ads.yaml",
            "my-proj",
            "proj_ads",
            {"start": ":YYYYMMDD-7"},
            {"dataset": "proj_ads"},
        )

        assert sorted(generated) == ["run-gaarf-bq.sh", "run-gaarf-console.sh", "run-gaarf.sh"]
        assert generated["run-gaarf-console.sh"].startswith(
            "ads-api-fetcher/js/gaarf ads/*.sql --account=123 --ads-config=google-ads.yaml "
            "--output=console"
        )
        assert "--bq.project=my-proj --bq.dataset=proj_ads --macro.start=:YYYYMMDD-7" in (
            generated["run-gaarf.sh"]
        )
        assert generated["run-gaarf-bq.sh"] == (
            "ads-api-fetcher/js/gaarf-bq bq/*.sql --project=my-proj --macro.dataset=proj_ads\n"
        )
