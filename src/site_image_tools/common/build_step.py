"""BuildStep - Abstract base class for image build steps."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from io import BytesIO
from typing import Generic

from loguru import logger
from PIL import Image
from pydantic import ValidationError

from .errors import ImageStepError, InvalidParameterError
from .item import ItemSink, ItemSource, ItemStoreError, OutputItem, SourceItem
from .schema_step import P, StepOutput, StepResult, StepStatus


class BuildStep(ABC, Generic[P]):
    """
    Stateless, template-method based build step.

    - Params are validated once and passed through
    - transform() is a pure bytes -> bytes function and raises on failure
    - execute() owns reading from the source and writing to the sink
    """

    schema: type[P]

    @property
    @abstractmethod
    def step_type(self) -> str: ...

    @abstractmethod
    def transform(self, params: P, item: SourceItem) -> bytes:
        """
        Transform one item.

        Raises:
            ImageStepError: On decode, format or parameter errors
        """
        ...

    def validate_params(self, params: Mapping[str, object] | P) -> P:
        if isinstance(params, self.schema):
            return params
        try:
            return self.schema.model_validate(params)
        except ValidationError as exc:
            raise InvalidParameterError(
                f"{self.step_type} params", dict(params), str(exc)
            ) from exc

    def execute(
        self,
        identifier: str,
        params: Mapping[str, object] | P,
        source: ItemSource,
        sink: ItemSink,
    ) -> StepResult:
        try:
            validated = self.validate_params(params)
            item = source.read(identifier)
            body = self.transform(validated, item)
            saved = sink.write(OutputItem(identifier=identifier, body=body))

        except (ImageStepError, ItemStoreError) as exc:
            logger.warning(f"{self.step_type} failed for {identifier}: {exc}")
            return StepResult(
                step_type=self.step_type,
                identifier=identifier,
                status=StepStatus.error,
                error_kind=exc.kind,
                error_message=str(exc),
            )

        except FileNotFoundError as exc:
            logger.warning(f"{self.step_type} failed for {identifier}: {exc}")
            return StepResult(
                step_type=self.step_type,
                identifier=identifier,
                status=StepStatus.error,
                error_kind="not_found",
                error_message=str(exc),
            )

        output = describe_output(body)
        logger.info(
            f"{self.step_type}: {identifier} -> {output.format} "
            + f"{output.width}x{output.height} ({saved.size} bytes)"
        )
        return StepResult(
            step_type=self.step_type,
            identifier=identifier,
            status=StepStatus.completed,
            output=output.model_dump(),
        )


def describe_output(body: bytes) -> StepOutput:
    """Read format and dimensions from encoded bytes (header only)."""
    with Image.open(BytesIO(body)) as img:
        return StepOutput(
            width=img.width,
            height=img.height,
            format=img.format or "",
            size=len(body),
        )
