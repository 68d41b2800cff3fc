"""
Unit Tests for Target API Endpoints
"""
from datetime import date

import pytest
from httpx import AsyncClient

from app.models import Target, UserRole


def target_payload(user_id, profile_id, **overrides):
    data = {
        'user_id': user_id,
        'profile_id': profile_id,
        'jobs_to_fetch': 100,
        'jobs_to_apply': 40,
        'start_date': '2025-03-24',
        'end_date': '2025-03-28',
        'is_weekly': True,
    }
    data.update(overrides)
    return data


@pytest.fixture
def add_target(db_session):
    async def _add(user, profile, **overrides):
        data = dict(
            user_id=user.id, profile_id=profile.id, jobs_to_fetch=10, jobs_to_apply=5,
            start_date=date(2025, 3, 24), end_date=date(2025, 3, 28),
        )
        data.update(overrides)
        target = Target(**data)
        db_session.add(target)
        await db_session.commit()
        await db_session.refresh(target)
        return target
    return _add


class TestCreateTarget:

    @pytest.mark.asyncio
    async def test_create(self, client: AsyncClient, manager_headers, lead_gen_user, profile):
        response = await client.post(
            '/api/v1/targets', json=target_payload(lead_gen_user.id, profile.id), headers=manager_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data['jobs_to_apply'] == 40
        assert data['is_weekly'] is True
        assert data['start_date'] == '2025-03-24'

    @pytest.mark.asyncio
    async def test_negative_jobs_rejected(self, client: AsyncClient, manager_headers, lead_gen_user, profile):
        response = await client.post(
            '/api/v1/targets',
            json=target_payload(lead_gen_user.id, profile.id, jobs_to_fetch=-1),
            headers=manager_headers,
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_end_before_start_rejected(self, client: AsyncClient, manager_headers, lead_gen_user, profile):
        response = await client.post(
            '/api/v1/targets',
            json=target_payload(lead_gen_user.id, profile.id, start_date='2025-03-28', end_date='2025-03-24'),
            headers=manager_headers,
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(self, client: AsyncClient, manager_headers, profile):
        response = await client.post(
            '/api/v1/targets', json=target_payload(999, profile.id), headers=manager_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_lead_gen_cannot_create(self, client: AsyncClient, lead_gen_headers, lead_gen_user, profile):
        response = await client.post(
            '/api/v1/targets', json=target_payload(lead_gen_user.id, profile.id), headers=lead_gen_headers
        )

        assert response.status_code == 403


class TestListTargets:

    @pytest.mark.asyncio
    async def test_manager_sees_all_and_filters(
        self, client: AsyncClient, manager_headers, lead_gen_user, profile, make_user, add_target
    ):
        other = await make_user(UserRole.LEAD_GEN)
        await add_target(lead_gen_user, profile)
        await add_target(other, profile)

        everything = await client.get('/api/v1/targets', headers=manager_headers)
        filtered = await client.get('/api/v1/targets', params={'user_id': other.id}, headers=manager_headers)

        assert len(everything.json()) == 2
        assert [t['user_id'] for t in filtered.json()] == [other.id]
        assert filtered.json()[0]['user']['id'] == other.id
        assert filtered.json()[0]['profile']['id'] == profile.id

    @pytest.mark.asyncio
    async def test_non_manager_sees_own_only(
        self, client: AsyncClient, lead_gen_headers, lead_gen_user, profile, make_user, add_target
    ):
        other = await make_user(UserRole.LEAD_GEN)
        await add_target(lead_gen_user, profile)
        await add_target(other, profile)

        response = await client.get('/api/v1/targets', params={'user_id': other.id}, headers=lead_gen_headers)

        assert [t['user_id'] for t in response.json()] == [lead_gen_user.id]


class TestUpdateDeleteTarget:

    @pytest.mark.asyncio
    async def test_patch(self, client: AsyncClient, manager_headers, lead_gen_user, profile, add_target):
        target = await add_target(lead_gen_user, profile)

        response = await client.patch(
            f'/api/v1/targets/{target.id}',
            json={'jobs_to_fetch': 60, 'jobs_to_apply': 30},
            headers=manager_headers,
        )

        assert response.status_code == 200
        assert response.json()['jobs_to_fetch'] == 60
        assert response.json()['jobs_to_apply'] == 30

    @pytest.mark.asyncio
    @pytest.mark.parametrize('body', [
        {'jobs_to_fetch': 60},
        {'jobs_to_fetch': '60', 'jobs_to_apply': 30},
        {'jobs_to_fetch': 60, 'jobs_to_apply': 1.5},
    ])
    async def test_patch_requires_both_integers(
        self, client: AsyncClient, manager_headers, lead_gen_user, profile, add_target, body
    ):
        target = await add_target(lead_gen_user, profile)

        response = await client.patch(f'/api/v1/targets/{target.id}', json=body, headers=manager_headers)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_patch_missing(self, client: AsyncClient, manager_headers):
        response = await client.patch(
            '/api/v1/targets/999', json={'jobs_to_fetch': 1, 'jobs_to_apply': 1}, headers=manager_headers
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, manager_headers, lead_gen_user, profile, add_target):
        target = await add_target(lead_gen_user, profile)

        response = await client.delete(f'/api/v1/targets/{target.id}', headers=manager_headers)
        again = await client.delete(f'/api/v1/targets/{target.id}', headers=manager_headers)

        assert response.status_code == 204
        assert again.status_code == 404
