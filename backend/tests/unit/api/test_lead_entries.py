"""
Unit Tests for Lead Entry API Endpoints
"""
from datetime import date

import pytest
from httpx import AsyncClient

from app.models import LeadEntry, SalesAssignment, UserRole


def entry_payload(profile_id, **overrides):
    data = {
        'profile_id': profile_id,
        'date': '2025-03-24',
        'new_leads': 7,
        'client_rejections': 1,
        'team_rejections': 2,
    }
    data.update(overrides)
    return data


@pytest.fixture
def add_entry(db_session):
    async def _add(user, profile, day=date(2025, 3, 24), new_leads=3):
        entry = LeadEntry(
            user_id=user.id, profile_id=profile.id, date=day,
            new_leads=new_leads, client_rejections=0, team_rejections=0,
        )
        db_session.add(entry)
        await db_session.commit()
        await db_session.refresh(entry)
        return entry
    return _add


class TestCreateLeadEntry:

    @pytest.mark.asyncio
    async def test_create(self, client: AsyncClient, sales_headers, sales_user, sales_assignment, profile):
        response = await client.post(
            '/api/v1/lead-entries', json=entry_payload(profile.id), headers=sales_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data['user_id'] == sales_user.id
        assert data['new_leads'] == 7
        assert data['notes'] is None

    @pytest.mark.asyncio
    async def test_unassigned_profile_rejected(self, client: AsyncClient, sales_headers, sales_assignment, make_profile):
        other = await make_profile(name='Data Analyst')

        response = await client.post(
            '/api/v1/lead-entries', json=entry_payload(other.id), headers=sales_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_negative_counts_rejected(self, client: AsyncClient, sales_headers, sales_assignment, profile):
        response = await client.post(
            '/api/v1/lead-entries', json=entry_payload(profile.id, new_leads=-1), headers=sales_headers
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_lead_gen_cannot_post(self, client: AsyncClient, lead_gen_headers, profile):
        response = await client.post(
            '/api/v1/lead-entries', json=entry_payload(profile.id), headers=lead_gen_headers
        )

        assert response.status_code == 403


class TestListLeadEntries:

    @pytest.mark.asyncio
    async def test_manager_sees_all_in_window(
        self, client: AsyncClient, manager_headers, sales_user, profile, make_user, add_entry
    ):
        other = await make_user(UserRole.SALES)
        await add_entry(sales_user, profile, date(2025, 3, 24))
        await add_entry(other, profile, date(2025, 3, 28))
        await add_entry(other, profile, date(2025, 3, 31))

        response = await client.get(
            '/api/v1/lead-entries',
            params={'from_date': '2025-03-24', 'to_date': '2025-03-28'},
            headers=manager_headers,
        )

        assert response.status_code == 200
        assert len(response.json()) == 2
        assert response.json()[0]['profile']['id'] == profile.id

    @pytest.mark.asyncio
    async def test_sales_sees_own_only(
        self, client: AsyncClient, sales_headers, sales_user, profile, make_user, add_entry
    ):
        other = await make_user(UserRole.SALES)
        await add_entry(sales_user, profile)
        await add_entry(other, profile)

        response = await client.get('/api/v1/lead-entries', headers=sales_headers)

        assert [e['user_id'] for e in response.json()] == [sales_user.id]


class TestUpdateLeadEntry:

    @pytest.mark.asyncio
    async def test_owner_can_patch(self, client: AsyncClient, sales_headers, sales_user, sales_assignment, profile, add_entry):
        entry = await add_entry(sales_user, profile)

        response = await client.patch(
            f'/api/v1/lead-entries/{entry.id}',
            json={'new_leads': 12, 'notes': 'follow up'},
            headers=sales_headers,
        )

        assert response.status_code == 200
        assert response.json()['new_leads'] == 12
        assert response.json()['notes'] == 'follow up'
        assert response.json()['client_rejections'] == 0

    @pytest.mark.asyncio
    async def test_other_users_entry_forbidden(
        self, client: AsyncClient, sales_headers, profile, make_user, add_entry
    ):
        other = await make_user(UserRole.SALES)
        entry = await add_entry(other, profile)

        response = await client.patch(
            f'/api/v1/lead-entries/{entry.id}', json={'new_leads': 1}, headers=sales_headers
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_missing_entry(self, client: AsyncClient, sales_headers):
        response = await client.patch('/api/v1/lead-entries/999', json={'new_leads': 1}, headers=sales_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_moving_to_unassigned_profile_rejected(
        self, client: AsyncClient, sales_headers, sales_user, sales_assignment, profile, make_profile, add_entry
    ):
        entry = await add_entry(sales_user, profile)
        other = await make_profile(name='QA Engineer')

        response = await client.patch(
            f'/api/v1/lead-entries/{entry.id}', json={'profile_id': other.id}, headers=sales_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_moving_to_assigned_profile(
        self, client: AsyncClient, db_session, sales_headers, sales_user, sales_assignment, profile, make_profile, add_entry
    ):
        entry = await add_entry(sales_user, profile)
        other = await make_profile(name='QA Engineer')
        db_session.add(SalesAssignment(user_id=sales_user.id, profile_id=other.id))
        await db_session.commit()

        response = await client.patch(
            f'/api/v1/lead-entries/{entry.id}', json={'profile_id': other.id}, headers=sales_headers
        )

        assert response.status_code == 200
        assert response.json()['profile_id'] == other.id
