"""
create-gaarf-wf: interactive generator for Gaarf Workflow.

Provisions Google Cloud infrastructure for a Gaarf (Google Ads API Report
Fetcher) workflow: asks the operator questions, generates shell scripts and
optionally runs them.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-gaarf-wf")
except PackageNotFoundError:
    __version__ = "0.1.0"
