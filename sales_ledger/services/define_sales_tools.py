"""Sales Tool Schemas — tool-use definitions for the five ledger queries.

Invariants:
    - Every tool here has exactly one handler registered in ToolDispatch
    - All tools are read-only
    - Dates are ISO strings; omitted bounds mean "all history" / "up to now"
    - search_customers is the documented first step whenever the user names a customer

Design Decisions:
    - Descriptions carry usage hints ("use this first", example questions):
      the agent picks tools from descriptions alone
    - top_n / limit declare defaults in schema but no minimum: non-positive
      values return an empty report instead of a validation failure
"""

_DATE_FROM = {
    "type": "string",
    "description": (
        "Optional start date (ISO format, e.g. 2024-01-01). "
        "Omit to include all historical sales."
    ),
}

_DATE_TO = {
    "type": "string",
    "description": (
        "Optional end date (ISO format, e.g. 2024-12-31). "
        "Omit to include up to today."
    ),
}

TOOLS_SALES = [
    {
        "name": "search_customers",
        "description": (
            "Searches for customers by name. Use this first whenever the user "
            "refers to a customer by name so you can resolve their ID before "
            "calling any other tool. Returns matching customer IDs, names, and emails."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "name_query": {
                    "type": "string",
                    "description": (
                        "Partial or full customer name to search for "
                        "(case-insensitive)"
                    ),
                },
            },
            "required": ["name_query"],
        },
    },
    {
        "name": "get_sales_for_customer",
        "description": (
            "Returns sales transactions for a specific customer, optionally "
            "filtered by date range. Includes each sale's amount and date, plus "
            "a total summary. If no date range is provided, returns all sales "
            "for the customer."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "customer_id": {
                    "type": "integer",
                    "description": (
                        "The unique ID of the customer (use search_customers "
                        "first to resolve a name to an ID)"
                    ),
                },
                "date_from": _DATE_FROM,
                "date_to": _DATE_TO,
            },
            "required": ["customer_id"],
        },
    },
    {
        "name": "get_top_customers",
        "description": (
            "Returns the top customers ranked by total sales revenue, optionally "
            "filtered by date range. Useful for questions like 'who are our best "
            "customers this year?' or 'who spent the most last quarter?'"
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "date_from": _DATE_FROM,
                "date_to": _DATE_TO,
                "top_n": {
                    "type": "integer",
                    "default": 5,
                    "description": "Number of top customers to return (default is 5)",
                },
            },
            "required": [],
        },
    },
    {
        "name": "get_sales_summary",
        "description": (
            "Returns an overall sales summary across all customers for a given "
            "period. Useful for high-level business questions like 'how did we "
            "do this month?' or 'what is our total revenue this year?'"
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "date_from": _DATE_FROM,
                "date_to": _DATE_TO,
            },
            "required": [],
        },
    },
    {
        "name": "get_recent_sales",
        "description": (
            "Returns the most recent sales transactions, optionally filtered to "
            "a specific customer. Useful for questions like 'show me the latest "
            "sales', 'what has Acme bought recently?', or 'when did Wayne "
            "Technologies last make a purchase?'"
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "customer_id": {
                    "type": "integer",
                    "description": (
                        "Optional customer ID to filter by. Omit to get recent "
                        "sales across all customers. Use search_customers first "
                        "to resolve a name to an ID."
                    ),
                },
                "limit": {
                    "type": "integer",
                    "default": 10,
                    "description": "Number of recent sales to return (default is 10)",
                },
            },
            "required": [],
        },
    },
]
