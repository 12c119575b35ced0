"""Use-cases: the evaluation runner and the aggregator."""
