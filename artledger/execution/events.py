from artledger.execution.runtime import Runtime


class LogEvent:
    """
    Declares a notification and its typed parameters, e.g.

        TransferEvent = LogEvent('Transfer', {
            'from': {'type': str, 'idx': True},
            'to': {'type': str, 'idx': True},
            'token_id': {'type': int, 'idx': True}
        })

    Calling the declaration with a runtime and a data dict validates the data and buffers it on the runtime. The
    executor only publishes buffered events once the call has succeeded.
    """
    def __init__(self, event: str, params: dict):
        assert isinstance(event, str) and event, 'Event name must be a non-empty string.'
        self.event = event
        self.params = params

    def _validate(self, data: dict):
        assert set(data.keys()) == set(self.params.keys()), \
            'Event {} expects {}, got {}.'.format(self.event, sorted(self.params.keys()), sorted(data.keys()))

        for name, param in self.params.items():
            value = data[name]
            t = param.get('type')

            assert isinstance(value, t), 'Event {} param {} must be {}, got {}.'.format(
                self.event, name, t, type(value)
            )

    def indexed(self):
        return [name for name, param in self.params.items() if param.get('idx')]

    def __call__(self, rt: Runtime, data: dict):
        self._validate(data)
        rt.emit(self.event, dict(data))
