"""
Reactivation Model Test Module

Covers the dormant-lead and past-customer sub-models, their combination into
a ReactivationLeak, and the campaign ROI projection.
"""

import pytest

from revenue_leak.models import BusinessInputRecord
from revenue_leak.services.normalizer import normalize_record
from revenue_leak.services.reactivation import (
    calculate_dormant_leads,
    calculate_frequency_score,
    calculate_past_customers,
    calculate_quick_win_score,
    calculate_reactivation,
    format_payback_period,
    project_reactivation_roi,
)


@pytest.fixture
def reactivation_data(reactivation_record):
    return normalize_record(reactivation_record)


class TestDormantLeads:
    """Tests for calculate_dormant_leads."""

    def test_expected_values(self, reactivation_data):
        """1000 leads x 40% viable x 22% response x 25% close x $1,200."""
        dormant = calculate_dormant_leads(reactivation_data)

        assert dormant.viableLeads == 400
        assert dormant.viabilityRate == 40
        assert dormant.expectedCustomers == 22.0
        assert dormant.bestCaseCustomers == 35.0
        assert dormant.monthlyLoss == 26400
        assert dormant.annualLoss == 316800
        assert dormant.recontactStatus == "Never recontacted"
        assert dormant.upside == 26400

    def test_partial_recontact_reduces_upside(self, reactivation_record):
        """Upside excludes the share of the database already recontacted."""
        record = reactivation_record.model_copy(
            update={"everRecontactedDormant": True, "percentageRecontactedDormant": 25}
        )
        dormant = calculate_dormant_leads(normalize_record(record))

        assert dormant.recontactStatus == "Partially recontacted (25%)"
        assert dormant.monthlyLoss == 26400
        assert dormant.upside == 19800

    def test_older_database_is_less_viable(self, reactivation_record):
        """A 2+ year database keeps 15% of its leads."""
        record = reactivation_record.model_copy(update={"databaseAge": "2+years"})
        assert calculate_dormant_leads(normalize_record(record)).viableLeads == 150

    def test_absent_when_no_dormant_leads(self, reactivation_record):
        """A "no" answer yields None."""
        record = reactivation_record.model_copy(update={"hasDormantLeads": False})
        assert calculate_dormant_leads(normalize_record(record)) is None

    def test_absent_when_count_is_zero(self, reactivation_record):
        """A "yes" with zero leads also yields None."""
        record = reactivation_record.model_copy(update={"totalDormantLeads": 0})
        assert calculate_dormant_leads(normalize_record(record)) is None


class TestPastCustomers:
    """Tests for calculate_past_customers."""

    def test_expected_values(self, reactivation_data):
        """500 customers x 30% winnable x 20% win-back x $1,200 x 1.15."""
        past = calculate_past_customers(reactivation_data)

        assert past.winnableCustomers == 150
        assert past.currentlyRecovered == 0
        assert past.frequencyScore == 0
        assert past.monthlyLoss == 41400
        assert past.upside == 41400
        assert past.recommendedFrequency == "quarterly"
        assert past.currentStatus == "No re-engagement campaigns"

    def test_recommended_cadence_recovers_some(self, reactivation_record):
        """A quarterly cadence already wins back 20% of eligible customers."""
        record = reactivation_record.model_copy(
            update={"sendsReengagementCampaigns": True, "reengagementFrequency": "quarterly"}
        )
        past = calculate_past_customers(normalize_record(record))

        assert past.frequencyScore == 100
        assert past.currentlyRecovered == 30
        assert past.winnableCustomers == 120
        assert past.monthlyLoss == 33120
        assert past.upside == 0

    @pytest.mark.parametrize(
        "sends,frequency,expected",
        [
            (False, "monthly", 0),
            (True, "monthly", 100),
            (True, "quarterly", 100),
            (True, "twice-a-year", 50),
            (True, "once-a-year", 25),
            (True, "rarely", 13),
            (True, None, 13),
        ],
    )
    def test_frequency_score(self, sends, frequency, expected):
        """Cadence is scored against four campaigns a year."""
        assert calculate_frequency_score(sends, frequency) == expected

    def test_absent_when_no_past_customers(self, reactivation_record):
        """A "no" answer yields None."""
        record = reactivation_record.model_copy(update={"hasPastCustomers": False})
        assert calculate_past_customers(normalize_record(record)) is None


class TestReactivationOpportunity:
    """Tests for calculate_reactivation."""

    def test_monthly_loss_is_sum_of_sub_models(self, reactivation_data):
        """Combined loss is dormant + past."""
        reactivation = calculate_reactivation(reactivation_data)

        assert reactivation.monthlyLoss == 26400 + 41400
        assert reactivation.annualLoss == reactivation.monthlyLoss * 12
        low, high = reactivation.monthlyLossRange
        assert low <= reactivation.monthlyLoss <= high

    def test_summary_fields(self, reactivation_data):
        """550 untouched contacts saturate the quick-win score."""
        reactivation = calculate_reactivation(reactivation_data)

        assert reactivation.quickWinScore == 100
        assert reactivation.expectedROI == "33.9x"
        assert reactivation.paybackPeriod == "1 day"
        assert reactivation.implementationTime == "7-14 days"

    def test_missing_sub_model_contributes_zero(self, reactivation_record):
        """Only past customers: combined loss equals the past-customer loss."""
        record = reactivation_record.model_copy(update={"hasDormantLeads": False})
        reactivation = calculate_reactivation(normalize_record(record))

        assert reactivation.dormantLeads is None
        assert reactivation.monthlyLoss == reactivation.pastCustomers.monthlyLoss

    def test_nothing_to_reactivate(self, empty_record):
        """No contact history: zero loss, zero score, no payback."""
        reactivation = calculate_reactivation(normalize_record(empty_record))

        assert reactivation.dormantLeads is None
        assert reactivation.pastCustomers is None
        assert reactivation.monthlyLoss == 0
        assert reactivation.quickWinScore == 0
        assert reactivation.paybackPeriod == "N/A"

    def test_quick_win_score_components(self):
        """Base 40, half contact saturation (+15), half untouched (+15)."""
        assert calculate_quick_win_score(10000, 250, 5000) == 70
        assert calculate_quick_win_score(0, 250, 0) == 0

    def test_payback_period_format(self):
        """Payback is days to repay a $2,000 campaign."""
        assert format_payback_period(1000) == "60 days"
        assert format_payback_period(0) == "N/A"


class TestROIProjection:
    """Tests for project_reactivation_roi."""

    def test_default_campaign(self, reactivation_data):
        """550 contacts x 22% = 121 customers x $1,200 on a $2,000 campaign."""
        projection = project_reactivation_roi(
            calculate_reactivation(reactivation_data), reactivation_data.customer_lifetime_value
        )

        assert projection.campaignInvestment == 2000
        assert projection.expectedResponseRate == 22
        assert projection.totalContacts == 550
        assert projection.reactivatedCustomers == 121
        assert projection.revenueGenerated == 145200
        assert projection.netProfit == 143200
        assert projection.roi == 72.6
        assert projection.paybackDays == 1

    def test_inputs_are_clamped(self, reactivation_data):
        """Investment clamps to [500, 10000], response rate to [15, 35]."""
        reactivation = calculate_reactivation(reactivation_data)

        high = project_reactivation_roi(reactivation, 1200, campaign_investment=50000, expected_response_rate=90)
        low = project_reactivation_roi(reactivation, 1200, campaign_investment=10, expected_response_rate=1)

        assert (high.campaignInvestment, high.expectedResponseRate) == (10000, 35)
        assert (low.campaignInvestment, low.expectedResponseRate) == (500, 15)

    def test_no_contacts(self, empty_record):
        """Nothing to reactivate: no revenue, investment lost, 30-day payback."""
        data = normalize_record(empty_record)
        projection = project_reactivation_roi(calculate_reactivation(data), data.customer_lifetime_value)

        assert projection.totalContacts == 0
        assert projection.revenueGenerated == 0
        assert projection.netProfit == -2000
        assert projection.roi == 0
        assert projection.paybackDays == 30

    def test_lifetime_value_drives_revenue(self):
        """Repeat businesses earn the full lifetime value per reactivated customer."""
        record = BusinessInputRecord(
            avgTransactionValue=100,
            repeatCustomers=True,
            avgPurchasesPerCustomer=4,
            hasPastCustomers=True,
            numPastCustomers=1000,
            avgTimeSinceLastPurchase="3-6months",
        )
        data = normalize_record(record)
        projection = project_reactivation_roi(calculate_reactivation(data), data.customer_lifetime_value)

        # 1000 x 60% = 600 contacts x 22% = 132 customers x $400
        assert projection.totalContacts == 600
        assert projection.revenueGenerated == 52800
