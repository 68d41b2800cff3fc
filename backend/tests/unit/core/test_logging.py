"""
Unit Tests for request logging
"""
import logging

import pytest
from httpx import AsyncClient

from app.core.logging_config import logger
from app.core.middleware import should_skip_logging


@pytest.mark.parametrize('status_code,level', [
    (200, logging.INFO),
    (302, logging.INFO),
    (404, logging.WARNING),
    (401, logging.WARNING),
    (500, logging.ERROR),
    (503, logging.ERROR),
])
def test_log_request_level_follows_status(monkeypatch, status_code, level):
    calls = []
    monkeypatch.setattr(logger, 'log', lambda lvl, msg, **kw: calls.append((lvl, msg, kw)))

    logger.log_request('GET', '/api/v1/profiles', status_code, 12.345, client_ip='10.0.0.1')

    assert len(calls) == 1
    lvl, msg, kw = calls[0]
    assert lvl == level
    assert msg == f'GET /api/v1/profiles - {status_code} (12.35ms)'
    assert kw['extra']['event_type'] == 'http_request'
    assert kw['extra']['http_status'] == status_code
    assert kw['extra']['client_ip'] == '10.0.0.1'


def test_health_and_docs_are_skipped():
    assert should_skip_logging('/health')
    assert not should_skip_logging('/api/v1/profiles')


class TestRequestLoggingMiddleware:

    @pytest.fixture
    def recorded(self, monkeypatch):
        calls = []

        def record(method, path, status_code, duration_ms, **kwargs):
            calls.append((method, path, status_code))

        monkeypatch.setattr(logger, 'log_request', record)
        return calls

    @pytest.mark.asyncio
    async def test_logs_rejected_request(self, client: AsyncClient, recorded):
        response = await client.get('/api/v1/profiles')

        assert response.status_code == 401
        assert recorded == [('GET', '/api/v1/profiles', 401)]

    @pytest.mark.asyncio
    async def test_logs_successful_request(self, client: AsyncClient, manager_headers, recorded):
        response = await client.get('/api/v1/profiles', headers=manager_headers)

        assert response.status_code == 200
        assert recorded == [('GET', '/api/v1/profiles', 200)]
        assert 'X-Request-ID' in response.headers

    @pytest.mark.asyncio
    async def test_health_check_not_logged(self, client: AsyncClient, recorded):
        await client.get('/health')

        assert recorded == []
