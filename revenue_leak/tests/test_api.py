"""
API Contract Test Module

Exercises every HTTP endpoint through an in-process ASGI client: response
shapes use camelCase field names, numeric edge cases are clamped rather than
rejected, and type errors are answered with 422.
"""

import pytest

from revenue_leak.core.config import Settings
from revenue_leak.core.dependencies import get_settings_dependency


WORKED_EXAMPLE = {"inquiriesWeekly": 80, "missedPer10": 3, "avgTicket": 4500, "closeRate": 0.35}


class TestServiceEndpoints:

    @pytest.mark.asyncio
    async def test_health(self, client):
        """Health probe answers healthy."""
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_root(self, client):
        """Root lists the service name and docs location."""
        body = (await client.get("/")).json()
        assert body["docs"] == "/docs"
        assert "version" in body


class TestExposureEndpoint:

    @pytest.mark.asyncio
    async def test_worked_example(self, client):
        """POST /exposure returns the worked example figures."""
        response = await client.post("/exposure", json=WORKED_EXAMPLE)

        assert response.status_code == 200
        body = response.json()
        assert body["missedWeekly"] == 24.0
        assert body["monthly"] == 151200
        assert body["daily"] == 5040
        assert body["yearly"] == 1814400

    @pytest.mark.asyncio
    async def test_out_of_range_values_are_clamped(self, client):
        """Negative and over-cap numbers are clamped, not rejected."""
        response = await client.post(
            "/exposure",
            json={"inquiriesWeekly": -5, "missedPer10": 15, "avgTicket": -100, "closeRate": 2.0},
        )
        assert response.status_code == 200
        assert response.json()["monthly"] == 0

    @pytest.mark.asyncio
    async def test_wrong_type_is_rejected(self, client):
        """A non-numeric string is a validation error."""
        response = await client.post("/exposure", json={"inquiriesWeekly": "lots"})
        assert response.status_code == 422


class TestCockpitEndpoint:

    @pytest.mark.asyncio
    async def test_qualified(self, client):
        """The worked example qualifies with the conservative exposure surfaced."""
        response = await client.post(
            "/cockpit",
            json={"inquiriesWeekly": 80, "missedPer10": 3, "avgTicket": 4500, "closeRate": 35},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "QUALIFIED"
        assert body["exposureMode"] == "floor"
        assert body["monthlyExposure"] == 151200
        assert body["fullExposure"]["monthly"] == 432000

    @pytest.mark.asyncio
    async def test_empty_body_is_incomplete(self, client):
        """A blank form is INCOMPLETE."""
        body = (await client.post("/cockpit", json={})).json()
        assert body["status"] == "INCOMPLETE"
        assert body["monthlyExposure"] == 0

    @pytest.mark.asyncio
    async def test_settings_override(self, client):
        """Thresholds are injected through the settings dependency."""
        from revenue_leak.main import app

        app.dependency_overrides[get_settings_dependency] = lambda: Settings(cockpit_min_inquiries=100)
        body = (
            await client.post(
                "/cockpit",
                json={"inquiriesWeekly": 80, "missedPer10": 3, "avgTicket": 4500, "closeRate": 35},
            )
        ).json()

        assert body["status"] == "DISQUALIFIED"
        assert body["statusReason"].startswith("LOW_INQUIRY_VOLUME")

    @pytest.mark.asyncio
    async def test_unknown_exposure_mode_rejected(self, client):
        """exposureMode must be floor or full."""
        response = await client.post("/cockpit", json={"exposureMode": "maximum"})
        assert response.status_code == 422


class TestLeaksEndpoints:

    @pytest.mark.asyncio
    async def test_calculate(self, client, dental_record):
        """POST /leaks returns the ranked breakdown with camelCase fields."""
        response = await client.post("/leaks", json=dental_record.model_dump(exclude_none=True))

        assert response.status_code == 200
        body = response.json()
        assert body["totalMonthlyLoss"] == 68460
        assert body["primaryConstraint"]["type"] == "after-hours"
        assert body["leaks"][0]["rank"] == 1
        assert body["leaks"][0]["constraintLabel"] == "Primary Constraint"
        assert body["leaks"][0]["monthlyLossRange"] == [14976, 22464]
        assert body["reactivationOpportunity"]["dormantLeads"] is None

    @pytest.mark.asyncio
    async def test_empty_record(self, client):
        """An empty body is a valid, all-zero calculation."""
        body = (await client.post("/leaks", json={})).json()
        assert body["totalMonthlyLoss"] == 0
        assert body["leaks"] == []

    @pytest.mark.asyncio
    async def test_missed_call_scenario(self, client, dental_record):
        """POST /leaks/scenarios/missed-calls projects 65% recovery."""
        response = await client.post(
            "/leaks/scenarios/missed-calls", json=dental_record.model_dump(exclude_none=True)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["available"] is True
        assert body["recoveredAmount"] == 6864
        assert body["newTotalMonthlyLoss"] == 61596


class TestReactivationEndpoint:

    @pytest.mark.asyncio
    async def test_default_projection(self, client, reactivation_record):
        """POST /reactivation/roi projects a default $2,000 campaign."""
        response = await client.post(
            "/reactivation/roi",
            json={"record": reactivation_record.model_dump(exclude_none=True)},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["totalContacts"] == 550
        assert body["reactivatedCustomers"] == 121
        assert body["roi"] == 72.6

    @pytest.mark.asyncio
    async def test_clamped_slider_values(self, client, reactivation_record):
        """Slider values outside their ranges are clamped."""
        body = (
            await client.post(
                "/reactivation/roi",
                json={
                    "record": reactivation_record.model_dump(exclude_none=True),
                    "campaignInvestment": 100000,
                    "expectedResponseRate": 5,
                },
            )
        ).json()

        assert body["campaignInvestment"] == 10000
        assert body["expectedResponseRate"] == 15

    @pytest.mark.asyncio
    async def test_record_required(self, client):
        """The record is mandatory."""
        response = await client.post("/reactivation/roi", json={"campaignInvestment": 2000})
        assert response.status_code == 422
