from __future__ import annotations
from dataclasses import dataclass
import json
import logging
import shutil
from .config import DEFAULT_TIMEOUT, ELLIPSIS
from .styles import Painter
from .styles import StyleClass as SC
from .util import output

log = logging.getLogger(__name__)

#: Display tags for the Azure cloud environments we know about
CLOUD_TAGS = {
    "AzureCloud": "Azure Commercial:",
    "AzureUSGovernment": "Azure Government:",
}

#: Tag used for environments not in `CLOUD_TAGS`
UNKNOWN_TAG = "Azure ?"


@dataclass
class CloudSession:
    #: The name of the active Azure cloud, e.g. ``AzureCloud``
    environment: str | None = None

    #: The ID of the active subscription, if logged in
    subscription_id: str | None = None

    #: The display name of the active subscription, if logged in
    subscription_name: str | None = None

    @property
    def tag(self) -> str | None:
        if self.environment is None:
            return None
        return CLOUD_TAGS.get(self.environment, UNKNOWN_TAG)

    def label(self, ellipsis: str = ELLIPSIS) -> str:
        tag = self.tag or UNKNOWN_TAG
        if self.subscription_id is not None:
            sub_id = shorten_id(self.subscription_id, ellipsis)
            if self.subscription_name:
                return f"{tag} {self.subscription_name} ({sub_id})"
            return f"{tag} ({sub_id})"
        elif self.environment is not None:
            return f"{tag} not logged in"
        else:
            return f"{UNKNOWN_TAG} cli unavailable"

    def display(self, paint: Painter, ellipsis: str = ELLIPSIS) -> str:
        return paint(self.label(ellipsis), SC.CLOUD)


def cloud_session(timeout: float = DEFAULT_TIMEOUT) -> CloudSession:
    """
    Query the Azure CLI for the active cloud & subscription.  Any field that
    cannot be determined is left as `None`; this function never raises.
    """
    if (az := shutil.which("az")) is None:
        log.debug("Azure CLI not found on PATH")
        return CloudSession()
    try:
        return _cloud_session(az, timeout)
    except Exception:
        log.debug("Unexpected error while querying the Azure CLI", exc_info=True)
        return CloudSession()


def _cloud_session(az: str, timeout: float) -> CloudSession:
    environment = output(
        az, "cloud", "show", "--query", "name", "--output", "tsv", timeout=timeout
    )
    if not environment:
        environment = None
    sub_id: str | None = None
    sub_name: str | None = None
    account = output(az, "account", "show", "--output", "json", timeout=timeout)
    if account is not None:
        try:
            data = json.loads(account)
        except ValueError:
            log.debug("Could not parse `az account show` output: %r", account)
        else:
            if isinstance(data, dict):
                sub_id = strfield(data.get("id"))
                sub_name = strfield(data.get("name"))
            else:
                log.debug("`az account show` did not return an object: %r", data)
    return CloudSession(
        environment=environment,
        subscription_id=sub_id,
        subscription_name=sub_name,
    )


def shorten_id(s: str, ellipsis: str = ELLIPSIS) -> str:
    """
    Abbreviate an ID of 8 or more characters to its first & last four
    characters joined by ``ellipsis``
    """
    if len(s) >= 8:
        return s[:4] + ellipsis + s[-4:]
    else:
        return s


def strfield(value: object) -> str | None:
    return value if isinstance(value, str) and value else None
