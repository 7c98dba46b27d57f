# fishcast/app/stores/__init__.py
from fishcast.app.stores.user_store import UserStore
from fishcast.app.stores.condition_store import ConditionStore
from fishcast.app.stores.prediction_store import PredictionStore
from fishcast.app.stores.catch_store import CatchStore
from fishcast.app.stores.hotspot_store import HotspotStore

__all__ = ["UserStore", "ConditionStore", "PredictionStore", "CatchStore", "HotspotStore"]
