"""
INFRASTRUCTURE LAYER - Adapters to the hosted backend

- persistence/: typed repositories over the Supabase query builder
- functions/: gateways to the hosted edge functions
"""
