"""OpenTelemetry tracing helpers for the task list client.

`trace_function` wraps a sync or async callable in a span; `trace_class`
applies it to the public methods of a class. Spans record exceptions and
set an error status before the exception is re-raised. Only the
`opentelemetry-api` package is required: without a configured SDK the
tracer is a no-op.

Usage:
    ```python
    @trace_class(kind=SpanKind.CLIENT)
    class TaskClient:
        async def list_tasks(self): ...


    @trace_function(span_name='tasklist.render', attributes={'ui': 'cli'})
    def render(view): ...
    ```
"""

import functools
import inspect
import logging

from collections.abc import Callable, Mapping
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Span, StatusCode
from opentelemetry.trace import SpanKind as _SpanKind


SpanKind = _SpanKind
__all__ = ['SpanKind', 'trace_class', 'trace_function']
INSTRUMENTING_MODULE_NAME = 'tasklist-client'
INSTRUMENTING_MODULE_VERSION = '0.1.0'

logger = logging.getLogger(__name__)

AttributeExtractor = Callable[
    [Span, tuple, dict, Any, BaseException | None], None
]


def _get_tracer() -> trace.Tracer:
    return trace.get_tracer(
        INSTRUMENTING_MODULE_NAME, INSTRUMENTING_MODULE_VERSION
    )


def _finish_span(
    span: Span,
    span_name: str,
    extractor: AttributeExtractor | None,
    args: tuple,
    kwargs: dict,
    result: Any,
    exception: BaseException | None,
) -> None:
    if extractor is None:
        return
    try:
        extractor(span, args, kwargs, result, exception)
    except Exception as e:
        logger.error(
            'attribute_extractor failed for span %s: %s', span_name, e
        )


def trace_function(
    func: Callable | None = None,
    *,
    span_name: str | None = None,
    kind: SpanKind = SpanKind.INTERNAL,
    attributes: Mapping[str, Any] | None = None,
    attribute_extractor: AttributeExtractor | None = None,
):
    """Traces each call of `func` in its own span.

    Usable bare (`@trace_function`) or with arguments
    (`@trace_function(span_name='x')`).

    Args:
        func: The callable to wrap. None when used with arguments.
        span_name: Span name, defaults to `module.qualname` of `func`.
        kind: The span kind.
        attributes: Static attributes set on every span.
        attribute_extractor: Called as
            `(span, args, kwargs, result, exception)` once the call ends,
            to add dynamic attributes. Its own failures are logged and
            otherwise ignored.
    """
    if func is None:
        return functools.partial(
            trace_function,
            span_name=span_name,
            kind=kind,
            attributes=attributes,
            attribute_extractor=attribute_extractor,
        )

    name = span_name or f'{func.__module__}.{func.__qualname__}'
    static_attributes = dict(attributes or {})

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            with _get_tracer().start_as_current_span(
                name, kind=kind, attributes=static_attributes
            ) as span:
                result = None
                exception = None
                try:
                    result = await func(*args, **kwargs)
                    span.set_status(StatusCode.OK)
                    return result
                except Exception as e:
                    exception = e
                    span.record_exception(e)
                    span.set_status(StatusCode.ERROR, description=str(e))
                    raise
                finally:
                    _finish_span(
                        span,
                        name,
                        attribute_extractor,
                        args,
                        kwargs,
                        result,
                        exception,
                    )

        return async_wrapper

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        with _get_tracer().start_as_current_span(
            name, kind=kind, attributes=static_attributes
        ) as span:
            result = None
            exception = None
            try:
                result = func(*args, **kwargs)
                span.set_status(StatusCode.OK)
                return result
            except Exception as e:
                exception = e
                span.record_exception(e)
                span.set_status(StatusCode.ERROR, description=str(e))
                raise
            finally:
                _finish_span(
                    span,
                    name,
                    attribute_extractor,
                    args,
                    kwargs,
                    result,
                    exception,
                )

    return sync_wrapper


def trace_class(
    include_list: list[str] | None = None,
    exclude_list: list[str] | None = None,
    kind: SpanKind = SpanKind.INTERNAL,
):
    """Applies `trace_function` to the public methods of a class.

    Private methods (leading underscore) are never traced. When
    `include_list` is given only those methods are traced, otherwise every
    public method not named in `exclude_list`.
    """
    excluded = set(exclude_list or [])

    def decorator(cls):
        for name, method in inspect.getmembers(cls, inspect.isfunction):
            if name.startswith('_'):
                continue
            if include_list is not None and name not in include_list:
                continue
            if include_list is None and name in excluded:
                continue
            setattr(
                cls,
                name,
                trace_function(
                    method,
                    span_name=f'{cls.__module__}.{cls.__name__}.{name}',
                    kind=kind,
                ),
            )
        return cls

    return decorator
