"""Nanomaterial models (graphene, MoS₂, carbon nanotubes), doping and quantum defect simulation."""

__version__ = "0.1.0"