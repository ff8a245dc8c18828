"""Toastr - live-configured chat command channels."""
