# (c) Copyright IBM Corp. 2025

import json
from typing import Any, Optional

from lcu_auth.log import logger


def to_json(obj: Any) -> Optional[str]:
    """
    Convert the given object to a pretty-printed JSON string.

    Objects exposing to_dict() (such as Credentials) are serialized through it.

    :param obj: The object to serialize to JSON.
    :return: The JSON string, None if the object cannot be encoded.
    """
    try:

        def extractor(o: Any) -> dict:
            if hasattr(o, "to_dict"):
                return o.to_dict()
            if not hasattr(o, "__dict__"):
                logger.debug(f"Couldn't serialize non dict type: {type(o)}")
                return {}
            return {k.lower(): v for k, v in o.__dict__.items() if v is not None}

        return json.dumps(obj, default=extractor, sort_keys=True, indent=2)
    except (TypeError, ValueError):
        logger.debug("to_json non-fatal encoding issue: ", exc_info=True)
        return None
