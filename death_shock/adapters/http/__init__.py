from death_shock.adapters.http.openshock_client import OpenShockClient

__all__ = ["OpenShockClient"]
