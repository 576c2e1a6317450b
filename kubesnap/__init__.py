"""Snapshot monitor for KubeVirt VirtualMachines and their VolumeSnapshots."""

__version__ = "0.1.0"
