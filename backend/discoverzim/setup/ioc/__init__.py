from discoverzim.setup.ioc.container import AppProvider, StoreProvider, create_container

__all__ = ["AppProvider", "StoreProvider", "create_container"]
