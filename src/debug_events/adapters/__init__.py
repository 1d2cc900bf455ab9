from debug_events.adapters.receipts import as_transaction, log_entry_from_raw, named_args

__all__ = ["as_transaction", "log_entry_from_raw", "named_args"]
