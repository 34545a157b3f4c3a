"""Small shared helpers: backoff, idempotency keys, event streams and logging."""