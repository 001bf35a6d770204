import requests

DEFAULT_TIMEOUT = 10  # seconds


class TimeoutSession(requests.Session):
    "A requests session that applies a default timeout to every request made through it"

    def __init__(self, timeout=DEFAULT_TIMEOUT):
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        if kwargs.get('timeout') is None:
            kwargs['timeout'] = self.timeout
        return super().request(method, url, **kwargs)
