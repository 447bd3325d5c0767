from webshop.loaders.snapshot_loader import load_snapshot, default_snapshot_path

__all__ = ['load_snapshot', 'default_snapshot_path']
