"""Collaborators that talk to the cluster and the local host."""
from cephdisk.services.client import ApiReader, ClusterClient, MockClusterClient
from cephdisk.services.host import HostIdentity, LocalHostIdentity

__all__ = ['ApiReader', 'ClusterClient', 'HostIdentity', 'LocalHostIdentity', 'MockClusterClient']
