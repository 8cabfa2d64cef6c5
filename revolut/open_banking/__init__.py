from .client import OpenBankingAuthentication, OpenBankingClientBuilder, openbanking_client

__all__ = ["OpenBankingAuthentication", "OpenBankingClientBuilder", "openbanking_client"]
