"""
Pydantic models used for input validation of the public assertions.
"""
# pylint: disable=no-name-in-module, no-self-argument, too-few-public-methods
import logging
from typing import (Any,
                    Optional,
                    Union)
from pydantic import (BaseModel,
                      ConfigDict,
                      StrictStr,
                      field_validator,)
from .defaults import VERIFIER_DEFAULTS

logger = logging.getLogger(__name__)


class SingletonCheckParams(BaseModel):
    """
    Parameters of a single ``assert_is_singleton`` run. Without an explicit
    factory_method, each of the default factory names is tried in order.
    """
    model_config = ConfigDict(frozen=True,
                              arbitrary_types_allowed=True)

    class_name: Union[StrictStr, type[Any]]
    factory_method: Optional[StrictStr] = None

    @field_validator("factory_method")
    @classmethod
    def factory_method_is_identifier(cls, v: Optional[str]) -> Optional[str]:
        """
        Field validator for factory_method. The name is looked up as an
        attribute, so anything that is not a Python identifier can never
        match.

        :param v: Value provided for factory_method
        :return: The unchanged method name
        """
        if v is not None and not v.isidentifier():
            raise ValueError(f"{v!r} is not a valid method name.")
        return v

    @property
    def factory_methods(self) -> tuple[str, ...]:
        """
        Candidate factory names, in lookup order.

        :return: The explicit name alone, or the defaults
        """
        if self.factory_method is not None:
            return (self.factory_method,)
        return VERIFIER_DEFAULTS["factory_methods"]
