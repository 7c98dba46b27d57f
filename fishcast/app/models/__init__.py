# fishcast/app/models/__init__.py
# Importing every model registers its table on Base.metadata
from fishcast.app.models.user import User
from fishcast.app.models.environmental_data import EnvironmentalData
from fishcast.app.models.catch_log import CatchLog
from fishcast.app.models.prediction import Prediction
from fishcast.app.models.hotspot import Hotspot

__all__ = ["User", "EnvironmentalData", "CatchLog", "Prediction", "Hotspot"]
