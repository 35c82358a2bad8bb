"""HTTP transport surface mounted at `/api/` by `HttpTransportModule`."""
