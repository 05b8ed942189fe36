from cep_relay.models.location.location import ViaCepResponse

__all__ = ["ViaCepResponse"]
