"""Scaffolding pipeline for KICKOFF.

This package contains:
- models: releases, templates and the RunContext threaded through a run
- versions: stage 1, Node.js release catalog
- runtime: stage 2, local Node.js reconciliation
- templates: stages 3 and 4, template catalog and selection
- puller: stage 5, destination directory and template fetch
- runner: the Pipeline that sequences the stages
"""

from kickoff.pipeline.models import (
    PipelineState,
    ReleaseInfo,
    RunContext,
    TemplateCatalog,
    TemplateDescriptor,
    VersionCatalog,
    parse_major,
)
from kickoff.pipeline.puller import TemplatePuller
from kickoff.pipeline.runner import Pipeline, StageSpec
from kickoff.pipeline.runtime import RuntimeReconciler
from kickoff.pipeline.templates import TemplateCatalogFetcher, TemplateSelector
from kickoff.pipeline.versions import VersionCatalogFetcher

__all__ = [
    # Models
    "PipelineState",
    "ReleaseInfo",
    "RunContext",
    "TemplateCatalog",
    "TemplateDescriptor",
    "VersionCatalog",
    "parse_major",
    # Stages
    "VersionCatalogFetcher",
    "RuntimeReconciler",
    "TemplateCatalogFetcher",
    "TemplateSelector",
    "TemplatePuller",
    # Runner
    "Pipeline",
    "StageSpec",
]
