"""ServiceNow Table API client pieces: request sending, records, typed values, query parameters and paging."""

__version__ = "0.1.0"