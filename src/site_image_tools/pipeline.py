"""Pipeline runtime - dispatches build steps over items."""

from collections.abc import Iterable, Mapping
from importlib.metadata import entry_points
from typing import cast

from loguru import logger

from .common.build_step import BuildStep
from .common.item import ItemSink, ItemSource
from .common.schema_step import BaseStepParams, StepResult

STEP_ENTRY_POINT_GROUP = "site_image_tools.steps"


class UnknownStepError(KeyError):
    def __init__(self, step_type: str):
        self.step_type: str = step_type
        super().__init__(f"No build step registered for '{step_type}'")


class StepFailedError(RuntimeError):
    """Raised by Pipeline.run_many in fail-fast mode."""

    def __init__(self, result: StepResult):
        self.result: StepResult = result
        super().__init__(
            f"{result.step_type} failed for {result.identifier} "
            + f"[{result.error_kind}]: {result.error_message}"
        )


def get_step_registry() -> dict[str, BuildStep[BaseStepParams]]:
    """Dynamically load all steps from entry points.

    Discovers steps from [project.entry-points."site_image_tools.steps"]
    in pyproject.toml.

    Returns:
        Dict mapping step_type -> BuildStep instance

    Raises:
        RuntimeError: If a step fails to load
    """
    registry: dict[str, BuildStep[BaseStepParams]] = {}

    for ep in entry_points(group=STEP_ENTRY_POINT_GROUP):
        try:
            step_class = cast(type[BuildStep[BaseStepParams]], ep.load())
        except Exception as e:
            raise RuntimeError(f"Failed to load step '{ep.name}': {e}") from e
        step = step_class()
        registry[step.step_type] = step

    logger.info(f"Loaded build steps: {sorted(registry)}")
    return registry


class Pipeline:
    """Runs registered build steps against a source and a sink.

    Items are processed one at a time; each call is independent of the
    others.

    Example:
        store = LocalItemStore("content/images", "_site/images")
        pipeline = Pipeline(store, store)

        pipeline.run_many(
            "image_scale",
            store.identifiers("**/*.jpg"),
            {"max_width": 600, "max_height": 400},
        )
    """

    def __init__(
        self,
        source: ItemSource,
        sink: ItemSink,
        step_registry: Mapping[str, BuildStep[BaseStepParams]] | None = None,
    ):
        """Initialize pipeline.

        Args:
            source: Where items are read from
            sink: Where transformed items are written to
            step_registry: Optional custom registry. If None, auto-discovers from entry points.
        """
        self.source: ItemSource = source
        self.sink: ItemSink = sink
        self.step_registry: dict[str, BuildStep[BaseStepParams]] = dict(
            step_registry if step_registry is not None else get_step_registry()
        )

    def get_supported_step_types(self) -> list[str]:
        return list(self.step_registry.keys())

    def get_step(self, step_type: str) -> BuildStep[BaseStepParams]:
        try:
            return self.step_registry[step_type]
        except KeyError:
            raise UnknownStepError(step_type) from None

    def run(
        self,
        step_type: str,
        identifier: str,
        params: Mapping[str, object],
    ) -> StepResult:
        """Run one step on one item."""
        step = self.get_step(step_type)
        return step.execute(identifier, params, self.source, self.sink)

    def run_many(
        self,
        step_type: str,
        identifiers: Iterable[str],
        params: Mapping[str, object],
        *,
        fail_fast: bool = False,
    ) -> list[StepResult]:
        """Run one step on several items, in order.

        Args:
            fail_fast: Raise StepFailedError on the first failed item instead
                       of reporting it and moving on.
        """
        step = self.get_step(step_type)
        results: list[StepResult] = []

        for identifier in identifiers:
            result = step.execute(identifier, params, self.source, self.sink)
            if fail_fast and not result.ok:
                raise StepFailedError(result)
            results.append(result)

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"{step_type}: processed {len(results)} items, {failed} failed")
        return results
