"""Kafka adapter – signed MQ event consumption."""
from mics_hooks.adapters.kafka.consumer import MqEventConsumer, OnConnect, OnMessage

__all__ = ["MqEventConsumer", "OnConnect", "OnMessage"]
