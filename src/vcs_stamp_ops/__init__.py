"""vcs-stamp operations layer."""

from .generate import GenerateResult, collect_metadata, generate_version_file

__all__ = ["GenerateResult", "collect_metadata", "generate_version_file"]
