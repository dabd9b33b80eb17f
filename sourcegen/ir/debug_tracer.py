import json
import time
from collections import defaultdict


class DebugTracer:
    """
    Records the calls made to the code generation helpers, with their
    arguments, results and exceptions.

    Each call gets an id and remembers the id of the call it was made from,
    so a caller can rebuild the call chain that led to a failing
    construction.
    """
    def __init__(self, enabled=False):
        self.enabled = enabled
        self.traces = []
        self.call_stats = defaultdict(int)
        self.start_time = time.time()
        self._open_calls = []
        self._last_call_id = 0

    @property
    def depth(self):
        return len(self._open_calls)

    def _append(self, operation, event_type, data):
        self.traces.append({
            'method_name': operation,
            'event_type': event_type,
            'data': data,
            'timestamp': time.time(),
            'call_depth': self.depth,
        })

    def _close_call(self):
        return self._open_calls.pop() if self._open_calls else 0

    def trace_call(self, operation, params):
        if not self.enabled:
            return
        self.call_stats[operation] += 1
        self._last_call_id += 1
        parent = self._open_calls[-1] if self._open_calls else 0
        self._append(operation, 'call', dict(
            params,
            _call_id=self._last_call_id,
            _parent_call_id=parent,
            _call_count=self.call_stats[operation]))
        self._open_calls.append(self._last_call_id)

    def trace_return(self, operation, return_info):
        if not self.enabled:
            return
        call_id = self._close_call()
        self._append(operation, 'return', dict(return_info, _call_id=call_id))

    def trace_exception(self, operation, exception):
        if not self.enabled:
            return
        call_id = self._close_call()
        self._append(operation, 'exception', {
            '_call_id': call_id,
            'exception_type': type(exception).__name__,
            'exception_str': str(exception),
        })

    def get_traces(self):
        return self.traces

    def get_call_stats(self):
        """Returns how many times each operation was called."""
        return dict(self.call_stats)

    def get_call_chain(self, call_id):
        """Return the 'call' events leading to `call_id`, outermost first."""
        calls = {
            trace['data']['_call_id']: trace
            for trace in self.traces if trace['event_type'] == 'call'
        }
        chain = []
        while call_id in calls:
            chain.append(calls[call_id])
            call_id = calls[call_id]['data']['_parent_call_id']
        chain.reverse()
        return chain

    def to_json_string(self):
        return json.dumps({
            'trace': self.traces,
            'call_stats': self.get_call_stats(),
            'duration': time.time() - self.start_time,
            'total_entries': len(self.traces),
        }, indent=2)
