"""Pipeline runner.

Runs the five stages strictly in order over a single RunContext:

    INIT → VERSIONS_FETCHED → RUNTIME_RECONCILED → TEMPLATES_FETCHED
         → TEMPLATE_SELECTED → PULLED

Any KickoffError stops the run, marks the context FAILED and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import httpx

from kickoff.config.manager import ConfigManager
from kickoff.pipeline.models import PipelineState, RunContext
from kickoff.pipeline.puller import TemplatePuller
from kickoff.pipeline.runtime import RuntimeReconciler
from kickoff.pipeline.templates import TemplateCatalogFetcher, TemplateSelector
from kickoff.pipeline.versions import VersionCatalogFetcher
from kickoff.utils.console import console, print_step
from kickoff.utils.errors import KickoffError
from kickoff.utils.logging import log_message


class Stage(Protocol):
    def run(self, ctx: RunContext) -> None: ...


@dataclass(frozen=True)
class StageSpec:
    """A stage with its display title and the state it leads to."""

    title: str
    stage: Stage
    reaches: PipelineState
    spinner: bool = False


class Pipeline:
    """The scaffolding pipeline.

    Args:
        version_fetcher: Stage 1
        reconciler: Stage 2
        template_fetcher: Stage 3
        selector: Stage 4
        puller: Stage 5
    """

    def __init__(
        self,
        version_fetcher: VersionCatalogFetcher,
        reconciler: RuntimeReconciler,
        template_fetcher: TemplateCatalogFetcher,
        selector: TemplateSelector,
        puller: TemplatePuller,
    ) -> None:
        self.stages: list[StageSpec] = [
            StageSpec(
                "Fetching Node.js releases and the latest LTS",
                version_fetcher,
                PipelineState.VERSIONS_FETCHED,
                spinner=True,
            ),
            StageSpec("Checking Node.js", reconciler, PipelineState.RUNTIME_RECONCILED),
            StageSpec(
                "Fetching template list",
                template_fetcher,
                PipelineState.TEMPLATES_FETCHED,
                spinner=True,
            ),
            StageSpec("Selecting template", selector, PipelineState.TEMPLATE_SELECTED),
            StageSpec("Pulling template", puller, PipelineState.PULLED),
        ]

    @classmethod
    def from_config(
        cls,
        config: ConfigManager,
        *,
        template: str | None = None,
        directory: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> Pipeline:
        """Build a pipeline from loaded configuration and command-line inputs."""
        s = config.settings
        retry_config = config.get_retry_config()
        timeout = float(s.fetch_timeout_seconds)
        return cls(
            version_fetcher=VersionCatalogFetcher(
                s.node_index_url,
                timeout_seconds=timeout,
                retry_config=retry_config,
                http_client=http_client,
            ),
            reconciler=RuntimeReconciler(
                s.version_manager,
                strict=s.runtime_install_required,
            ),
            template_fetcher=TemplateCatalogFetcher(
                s.templates_manifest_url,
                timeout_seconds=timeout,
                retry_config=retry_config,
                http_client=http_client,
            ),
            selector=TemplateSelector(template),
            puller=TemplatePuller(
                directory,
                source=s.template_source,
                tool=s.fetch_tool,
            ),
        )

    def run(self, ctx: RunContext | None = None) -> RunContext:
        """Run every stage in order.

        Args:
            ctx: Context to fill (a fresh one by default)

        Returns:
            The completed context

        Raises:
            KickoffError: From the first stage that fails
        """
        if ctx is None:
            ctx = RunContext()
        for step in self.stages:
            print_step(step.title)
            try:
                if step.spinner:
                    with console.status(step.title, spinner="dots"):
                        step.stage.run(ctx)
                else:
                    step.stage.run(ctx)
            except KickoffError as e:
                log_message(f"Stage '{step.title}' failed: {e}")
                ctx.fail()
                raise
            ctx.advance(step.reaches)
            log_message(f"Pipeline state: {ctx.state.value}")
        return ctx


__all__ = ["Pipeline", "Stage", "StageSpec"]
