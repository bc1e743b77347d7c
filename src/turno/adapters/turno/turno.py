# Wrapper around the Turno HTTP API
from typing import Any, Dict, List, Optional
from urllib.parse import quote
import logging

from requests.exceptions import RequestException

from turno.adapters.turno.client import TurnoAPIClient

logger = logging.getLogger(__name__)


class TurnoAPI():
    """
    High-level calls against the mission store.

    Reads degrade to empty results when the server is unreachable so a UI
    can still render; writes raise so callers know the mutation was lost.
    """
    def __init__(self, client: Optional[TurnoAPIClient] = None):
        self._client: TurnoAPIClient = client or TurnoAPIClient()

    def fetch_missions(self) -> List[Dict[str, Any]]:
        try:
            missions = self._client.get("api/missions")
        except (RequestException, ValueError) as e:
            logger.error(f"Error fetching missions: {e}")
            return []
        logger.info(f"Missions fetched: {len(missions)} missions")
        return missions

    def fetch_used_combinations(self) -> Dict[str, Any]:
        try:
            return self._client.get("api/used-combinations")
        except (RequestException, ValueError) as e:
            logger.error(f"Error fetching used combinations: {e}")
            return {}

    def submit_mission(self, mission_data: Dict[str, Any]) -> Dict[str, Any]:
        """POST a mission; the response carries the server-finalized copy."""
        result = self._client.post("api/missions", json=mission_data)
        logger.info(f"Mission submitted: {result.get('mission', {}).get('id')}")
        return result

    def update_mission_status(self, mission_id: str, status: str) -> Dict[str, Any]:
        return self._client.put(f"api/missions/{quote(mission_id, safe='')}", json={"status": status})

    def delete_mission(self, mission_id: str) -> Dict[str, Any]:
        return self._client.delete(f"api/missions/{quote(mission_id, safe='')}")

    def save_used_combinations(self, combinations: Dict[str, Any]) -> Dict[str, Any]:
        return self._client.post("api/used-combinations", json={"combinations": combinations})

    def clear_all_data(self) -> Dict[str, Any]:
        logger.warning("Clearing all mission data")
        return self._client.delete("api/clear-all")
