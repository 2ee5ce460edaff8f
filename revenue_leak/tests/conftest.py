"""
Pytest Configuration and Shared Fixtures for the Revenue Leak Engine Tests.

Provides:
- Async test execution via pytest-asyncio
- Representative wizard records (dental practice, reactivation-only business)
- Cockpit inputs around the worked example (80 inquiries, 3/10 missed, $4,500, 35%)
- Settings isolation (cache cleared around every test)
- An in-process HTTP client for the FastAPI app

Hand-computed figures for dental_record:
    close rate 50/200 = 25%, ticket $1,200
    missed-calls 10560, slow-response 12000, no-follow-up 13680,
    no-show 7200, after-hours 18720, hold-time 6300, unqualified 0
    total operational monthly loss 68460
"""

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from revenue_leak.core.config import get_settings
from revenue_leak.models import BusinessInputRecord, CockpitInput


# ============================================================
# SETTINGS ISOLATION
# ============================================================

@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Clear the settings singleton before and after every test so env-var
    overrides set with monkeypatch never leak between tests.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================
# WIZARD RECORD FIXTURES
# ============================================================

@pytest.fixture
def dental_record() -> BusinessInputRecord:
    """
    A dental practice with every operational leak except unqualified leads.

    Business hours default to 9-17, closed and unanswered on weekends, so the
    after-hours share is 0.30 + 2 x 0.05 = 40%.
    """
    return BusinessInputRecord(
        businessName="Bright Smile Dental",
        industry="Dentist",
        totalMonthlyLeads=200,
        inboundCalls=140,
        closedDealsPerMonth=50,
        avgResponseTime="1-4hrs",
        percentageFollowedUp=60,
        avgFollowUpAttempts=2,
        missedCallRate="20-30%",
        avgHoldTime=2,
        requiresAppointments=True,
        appointmentsBooked=120,
        appointmentsShowUp=96,
        avgTransactionValue=1200,
    )


@pytest.fixture
def reactivation_record() -> BusinessInputRecord:
    """
    A business whose only opportunity is its contact history.

    Dormant: 1000 leads aged 6-12 months -> 400 viable -> 22 expected
    customers at 25% close x $1,200 = 26400/month.
    Past: 500 customers, 1-2 years since purchase -> 150 winnable, no
    campaigns -> 150 x 20% x $1,200 x 1.15 = 41400/month.
    """
    return BusinessInputRecord(
        businessName="Dormant Database Co",
        industry="Med Spa",
        avgTransactionValue=1200,
        answersAfterHours=True,
        hasDormantLeads=True,
        totalDormantLeads=1000,
        databaseAge="6-12months",
        everRecontactedDormant=False,
        hasPastCustomers=True,
        numPastCustomers=500,
        avgTimeSinceLastPurchase="1-2years",
        sendsReengagementCampaigns=False,
    )


@pytest.fixture
def empty_record() -> BusinessInputRecord:
    """A record with every field left blank."""
    return BusinessInputRecord()


# ============================================================
# COCKPIT FIXTURES
# ============================================================

@pytest.fixture
def qualified_cockpit_input() -> CockpitInput:
    """The worked example: conservative monthly exposure 151200."""
    return CockpitInput(
        inquiriesWeekly=80,
        missedPer10=3,
        avgTicket=4500,
        closeRate=35,
    )


@pytest.fixture
def zero_cockpit_input() -> CockpitInput:
    """Every core field zero."""
    return CockpitInput(inquiriesWeekly=0, missedPer10=0, avgTicket=0, closeRate=0)


# ============================================================
# HTTP CLIENT
# ============================================================

@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    In-process async HTTP client bound to the FastAPI app.

    Dependency overrides are cleared afterwards.
    """
    from revenue_leak.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
