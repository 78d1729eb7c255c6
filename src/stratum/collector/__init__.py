from stratum.collector.collector import RuleCollector

__all__ = ["RuleCollector"]
