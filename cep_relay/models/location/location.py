from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ViaCepResponse(BaseModel):
    """
    Subset of the ViaCEP lookup response.

    Only ``localidade`` and the ``erro`` marker are read; every other key is
    kept untyped in ``model_extra``. ViaCEP answers unknown postal codes with
    ``{"erro": true}`` (older deployments send the string ``"true"``), so only
    the presence of the key is meaningful.
    """

    model_config = ConfigDict(extra="allow")

    localidade: Optional[Any] = Field(None, description="City name")

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ViaCepResponse":
        return cls.model_validate(payload)

    @property
    def not_found(self) -> bool:
        return "erro" in (self.model_extra or {})
