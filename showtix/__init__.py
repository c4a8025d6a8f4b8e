"""ShowTix export - event transactions to bookkeeping CSV.

Pages through the ShowTix4U transactions search for one event, flattens
customers, transactions and tickets into sales-receipt line items, and
writes them as CSV for import into bookkeeping software.
"""

APP_ID = "showtix-export"
PURPOSE = "Export ShowTix4U event transactions as bookkeeping CSV"
