"""
Tracing helpers for the code generation operations.

Every public operation is decorated with `trace_operation`. Callers that
want a trace pass a `DebugTracer` through the `tracer` keyword argument;
without it the operation runs untouched.

    tracer = DebugTracer(enabled=True)
    write_constructor_invocation(cls, ..., tracer=tracer)
    print(tracer.to_json_string())
"""
from functools import wraps
from typing import Any, Callable, Dict, List, Optional
import inspect


def trace_operation(
    operation_name: Optional[str] = None,
    param_names: Optional[List[str]] = None,
    max_str_length: int = 200
) -> Callable:
    """
    Decorator that traces calls of a code generation operation.

    Args:
        operation_name: Name to use in traces (if None, uses the function name)
        param_names: Parameters to capture. If None, captures all of them.
                     If empty list, captures none.
        max_str_length: Maximum length for stringified parameter values
    """
    def decorator(operation: Callable) -> Callable:
        sig = inspect.signature(operation)

        @wraps(operation)
        def wrapper(*args, **kwargs):
            tracer = kwargs.pop('tracer', None)
            if tracer is None or not tracer.enabled:
                return operation(*args, **kwargs)

            trace_name = operation_name or operation.__name__
            params = {}
            if param_names is None or param_names:
                bound_args = sig.bind(*args, **kwargs)
                bound_args.apply_defaults()
                for name, value in bound_args.arguments.items():
                    if param_names is None or name in param_names:
                        params[name] = _stringify_value(value, max_str_length)

            tracer.trace_call(trace_name, params)
            try:
                result = operation(*args, **kwargs)
            except Exception as e:
                tracer.trace_exception(trace_name, e)
                raise
            tracer.trace_return(trace_name, _build_return_info(result))
            return result

        return wrapper
    return decorator


def _truncate(text: str, max_length: int) -> str:
    if len(text) > max_length:
        return text[:max_length] + '...'
    return text


def _stringify_value(value: Any, max_length: int = 200) -> str:
    if value is None:
        return 'None'

    if isinstance(value, (bool, int, float)):
        return str(value)

    if isinstance(value, str):
        return _truncate(value, max_length)

    if callable(value) and hasattr(value, '__name__'):
        return value.__name__

    if isinstance(value, (list, tuple, set, frozenset)):
        # Sets are sorted so that traces are reproducible.
        ordered = (sorted(value, key=str)
                   if isinstance(value, (set, frozenset)) else list(value))
        items = [_stringify_value(item, max_length // 4)
                 for item in ordered[:5]]
        if len(value) > 5:
            items.append(f'... +{len(value) - 5} more')
        return _truncate(f"[{', '.join(items)}]", max_length)

    if isinstance(value, dict):
        items = [f"{k}: {_stringify_value(v, max_length // 4)}"
                 for k, v in list(value.items())[:3]]
        if len(value) > 3:
            items.append(f'... +{len(value) - 3} more')
        return _truncate(f"{{{', '.join(items)}}}", max_length)

    return _truncate(str(value), max_length)


def _build_return_info(result: Any) -> Dict[str, Any]:
    info = {}

    if result is None:
        info['result'] = 'None'
        return info

    info['result_type'] = type(result).__name__

    if isinstance(result, (list, tuple, set)):
        info['result_size'] = len(result)

    info['result_value'] = str(result)[:100]
    return info
