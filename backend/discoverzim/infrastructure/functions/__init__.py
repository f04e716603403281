from discoverzim.infrastructure.functions.edge_functions import EdgeFunctionGateway

__all__ = ["EdgeFunctionGateway"]
