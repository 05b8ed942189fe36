from cep_relay.api.front.cep_routes import router as cep_router

__all__ = ["cep_router"]
