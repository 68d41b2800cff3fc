"""
Unit Tests for Assignment API Endpoints
"""
from datetime import date

import pytest
from httpx import AsyncClient

from app.models import Target, UserRole


class TestLeadGenAssignments:

    @pytest.mark.asyncio
    async def test_assign_creates(self, client: AsyncClient, manager_headers, lead_gen_user, profile):
        response = await client.post(
            '/api/v1/lead-gen-assignments',
            json={'user_id': lead_gen_user.id, 'profile_id': profile.id},
            headers=manager_headers,
        )

        assert response.status_code == 200
        assert response.json()['user_id'] == lead_gen_user.id
        assert response.json()['profile_id'] == profile.id

    @pytest.mark.asyncio
    async def test_assign_again_replaces_profile(
        self, client: AsyncClient, manager_headers, lead_gen_assignment, lead_gen_user, make_profile
    ):
        other = await make_profile(name='UX Designer')

        response = await client.post(
            '/api/v1/lead-gen-assignments',
            json={'user_id': lead_gen_user.id, 'profile_id': other.id},
            headers=manager_headers,
        )

        assert response.status_code == 200
        assert response.json()['id'] == lead_gen_assignment.id
        assert response.json()['profile_id'] == other.id

        listing = await client.get('/api/v1/lead-gen-assignments', headers=manager_headers)
        assert len(listing.json()) == 1
        assert listing.json()[0]['profile']['name'] == 'UX Designer'

    @pytest.mark.asyncio
    async def test_assign_rejects_wrong_role(self, client: AsyncClient, manager_headers, sales_user, profile):
        response = await client.post(
            '/api/v1/lead-gen-assignments',
            json={'user_id': sales_user.id, 'profile_id': profile.id},
            headers=manager_headers,
        )

        assert response.status_code == 400
        assert response.json()['error']['code'] == 'INVALID_ASSIGNMENT'

    @pytest.mark.asyncio
    async def test_assign_rejects_missing_profile(self, client: AsyncClient, manager_headers, lead_gen_user):
        response = await client.post(
            '/api/v1/lead-gen-assignments',
            json={'user_id': lead_gen_user.id, 'profile_id': 999},
            headers=manager_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_is_expanded(self, client: AsyncClient, manager_headers, lead_gen_assignment, lead_gen_user):
        response = await client.get('/api/v1/lead-gen-assignments', headers=manager_headers)

        assert response.status_code == 200
        item = response.json()[0]
        assert item['user']['username'] == lead_gen_user.username
        assert item['profile']['name'] == 'Software Engineer'

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, manager_headers, lead_gen_assignment, lead_gen_user):
        response = await client.delete(
            f'/api/v1/lead-gen-assignments/{lead_gen_user.id}', headers=manager_headers
        )
        again = await client.delete(
            f'/api/v1/lead-gen-assignments/{lead_gen_user.id}', headers=manager_headers
        )

        assert response.status_code == 204
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_forbidden_for_sales(self, client: AsyncClient, sales_headers):
        response = await client.get('/api/v1/lead-gen-assignments', headers=sales_headers)

        assert response.status_code == 403


class TestSalesAssignments:

    @pytest.mark.asyncio
    async def test_assign_is_idempotent(self, client: AsyncClient, manager_headers, sales_user, profile):
        payload = {'user_id': sales_user.id, 'profile_id': profile.id}

        first = await client.post('/api/v1/sales-assignments', json=payload, headers=manager_headers)
        second = await client.post('/api/v1/sales-assignments', json=payload, headers=manager_headers)

        assert first.status_code == 200
        assert second.json()['id'] == first.json()['id']

        listing = await client.get(
            '/api/v1/sales-assignments', params={'user_id': sales_user.id}, headers=manager_headers
        )
        assert len(listing.json()) == 1

    @pytest.mark.asyncio
    async def test_many_profiles_per_user(self, client: AsyncClient, manager_headers, sales_user, make_profile):
        for name in ('A', 'B'):
            created = await make_profile(name=name)
            await client.post(
                '/api/v1/sales-assignments',
                json={'user_id': sales_user.id, 'profile_id': created.id},
                headers=manager_headers,
            )

        listing = await client.get('/api/v1/sales-assignments', headers=manager_headers)

        assert [a['profile']['name'] for a in listing.json()] == ['A', 'B']

    @pytest.mark.asyncio
    async def test_assign_rejects_lead_gen_user(self, client: AsyncClient, manager_headers, lead_gen_user, profile):
        response = await client.post(
            '/api/v1/sales-assignments',
            json={'user_id': lead_gen_user.id, 'profile_id': profile.id},
            headers=manager_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_filter_by_user(self, client: AsyncClient, manager_headers, sales_assignment, make_user):
        other = await make_user(UserRole.SALES)

        response = await client.get(
            '/api/v1/sales-assignments', params={'user_id': other.id}, headers=manager_headers
        )

        assert response.json() == []

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, manager_headers, sales_assignment):
        response = await client.delete(f'/api/v1/sales-assignments/{sales_assignment.id}', headers=manager_headers)
        missing = await client.delete('/api/v1/sales-assignments/999', headers=manager_headers)

        assert response.status_code == 204
        assert missing.status_code == 404


class TestMyProfiles:

    @pytest.mark.asyncio
    async def test_my_profile_without_assignment(self, client: AsyncClient, lead_gen_headers):
        response = await client.get('/api/v1/my-profile', headers=lead_gen_headers)

        assert response.status_code == 404
        assert response.json()['detail'] == 'No profile assigned'

    @pytest.mark.asyncio
    async def test_my_profile_without_target(self, client: AsyncClient, lead_gen_headers, lead_gen_assignment, profile):
        response = await client.get('/api/v1/my-profile', headers=lead_gen_headers)

        assert response.status_code == 200
        assert response.json()['profile']['id'] == profile.id
        assert response.json()['target'] is None

    @pytest.mark.asyncio
    async def test_my_profile_latest_target(
        self, client: AsyncClient, db_session, lead_gen_headers, lead_gen_assignment, lead_gen_user, profile
    ):
        for start, end, apply in (
            (date(2025, 3, 17), date(2025, 3, 21), 10),
            (date(2025, 3, 24), date(2025, 3, 28), 25),
            (date(2025, 3, 10), date(2025, 3, 14), 5),
        ):
            db_session.add(Target(
                user_id=lead_gen_user.id, profile_id=profile.id, jobs_to_fetch=50, jobs_to_apply=apply,
                start_date=start, end_date=end, is_weekly=True,
            ))
        await db_session.commit()

        response = await client.get('/api/v1/my-profile', headers=lead_gen_headers)

        assert response.json()['target']['jobs_to_apply'] == 25
        assert response.json()['target']['end_date'] == '2025-03-28'

    @pytest.mark.asyncio
    async def test_my_profile_sales_forbidden(self, client: AsyncClient, sales_headers):
        response = await client.get('/api/v1/my-profile', headers=sales_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_my_profiles_for_sales(self, client: AsyncClient, sales_headers, sales_assignment, profile):
        response = await client.get('/api/v1/my-profiles', headers=sales_headers)

        assert response.status_code == 200
        assert [p['id'] for p in response.json()] == [profile.id]

    @pytest.mark.asyncio
    async def test_my_profiles_empty(self, client: AsyncClient, sales_headers):
        response = await client.get('/api/v1/my-profiles', headers=sales_headers)

        assert response.json() == []
