import requests_mock

from amazon_iap import TimeoutSession

url = 'https://rvs.test/thing'


def test_default_timeout():
    assert TimeoutSession().timeout == 10


def test_timeout_applied_to_requests():
    session = TimeoutSession(timeout=3)
    with requests_mock.Mocker() as m:
        m.get(url)
        m.post(url)
        session.get(url)
        session.post(url, json={})
        session.get(url, timeout=None)
    assert [req.timeout for req in m.request_history] == [3, 3, 3]


def test_explicit_timeout_wins():
    session = TimeoutSession(timeout=3)
    with requests_mock.Mocker() as m:
        m.get(url)
        session.get(url, timeout=(1, 5))
    assert m.request_history[0].timeout == (1, 5)
