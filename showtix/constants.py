"""Fixed endpoint, account labels and fee amounts for the export."""

from __future__ import annotations

from typing import List

# -----------------------------------------------------------------------------
# ShowTix4U API
# -----------------------------------------------------------------------------

TRANSACTIONS_URL = "https://www.showtix4u.com/api/transactions/search"

# Session cookie set by the ShowTix4U web app after login
SESSION_COOKIE = "connect.sid"

FIRST_PAGE = 1


# -----------------------------------------------------------------------------
# Accounts
# -----------------------------------------------------------------------------

DEPOSIT_ACCOUNT = "200.100 Undeposited Funds"
DONATION_ACCOUNT = "Contributed Income:Unrestricted Contributions"
CREDIT_CARD_FEE_ACCOUNT = "Credit Card Fees"
TICKET_INCOME_ACCOUNT = "Program Income:BO Income"
TICKETING_FEE_ACCOUNT = "Ticketing Fees"


# -----------------------------------------------------------------------------
# Fees
# -----------------------------------------------------------------------------

# Processing fee withheld on donations, as a fraction of the donation
CREDIT_CARD_FEE_RATE = 0.035

# Flat fee charged per complimentary (zero-price) ticket
COMP_TICKET_FEE = -1.5


# -----------------------------------------------------------------------------
# CSV output
# -----------------------------------------------------------------------------

CSV_HEADER: List[str] = [
    "Sales Receipt No",
    "Customer",
    "Sales Receipt Date",
    "Deposit To",
    "Payment Method",
    "Memo",
    "Line Item Service Date",
    "Line Item",
    "Line Item Amount",
]

AMOUNT_FORMAT = "{:.2f}"
