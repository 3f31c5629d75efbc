"""
Workflow provisioning services.

The wizard ties together GCP project selection, script generation and the
answers file.
"""

from .answers import DEFAULT_ANSWERS_FILE, load_answers, save_answers
from .gcp import GcpProjectSelector, parse_projects_csv
from .wizard import ProvisioningWizard

__all__ = [
    "DEFAULT_ANSWERS_FILE",
    "GcpProjectSelector",
    "ProvisioningWizard",
    "load_answers",
    "parse_projects_csv",
    "save_answers",
]
