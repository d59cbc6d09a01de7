from typing import Optional

import attrs


@attrs.define(frozen=True)
class UserEntity:
    """Acting principal resolved from the request - only the id matters for authorization"""

    id: str = attrs.field(validator=attrs.validators.instance_of(str))
    email: Optional[str] = None
