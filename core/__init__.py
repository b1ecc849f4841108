"""
Core Module - Store Discovery Pipeline
"""
from .urgency import classify_urgency
from .parser import parse_store_response
from .discovery import StoreDiscoveryClient
from .alerts import ClosingAlertScheduler
from .orchestrator import StoreFinder

__all__ = [
    'classify_urgency',
    'parse_store_response',
    'StoreDiscoveryClient',
    'ClosingAlertScheduler',
    'StoreFinder',
]
