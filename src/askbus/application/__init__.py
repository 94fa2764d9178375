"""Application layer – the query-aggregation bus."""
