from . import base as _base

component_names = _base.component_names
element_names = _base.element_names
identifiers = _base.identifiers
inner_scopes_kinds = _base.inner_scopes_kinds
intrinsic_names = _base.intrinsic_names
locations = _base.locations
member_paths = _base.member_paths
module_scope_chains = _base.module_scope_chains
namespaced_names = _base.namespaced_names
resolution_configs = _base.resolution_configs
scope_chains = _base.scope_chains
script_scope_chains = _base.script_scope_chains
simple_names = _base.simple_names
to_scope_chains = _base.to_scope_chains
