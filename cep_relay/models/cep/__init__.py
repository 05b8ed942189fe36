from cep_relay.models.cep.cep_request import CepRequest

__all__ = ["CepRequest"]
