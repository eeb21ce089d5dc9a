from ._core import (config as _config,
                    conventions as _conventions,
                    extraction as _extraction,
                    names as _names,
                    reporting as _reporting,
                    rule as _rule,
                    scoping as _scoping)

Diagnostic = _reporting.Diagnostic
ElementName = _names.ElementName
InvalidOptions = _config.InvalidOptions
Location = _names.Location
MemberPath = _names.MemberPath
NamespacedName = _names.NamespacedName
Reference = _extraction.Reference
Report = _reporting.Report
ResolutionConfig = _config.ResolutionConfig
Scope = _scoping.Scope
ScopeKind = _scoping.ScopeKind
SimpleName = _names.SimpleName
SourceType = _config.SourceType
Verdict = _scoping.Verdict

RULE_NAME = _rule.NAME
RULE_DESCRIPTION = _rule.DESCRIPTION
RULE_CATEGORY = _rule.CATEGORY
RULE_RECOMMENDED = _rule.RECOMMENDED
RULE_DOCS_URL = _rule.DOCS_URL

check_element = _rule.check_element
check_unit = _rule.check_unit
emit = _reporting.emit
is_implicit_receiver = _extraction.is_implicit_receiver
is_intrinsic_tag_name = _conventions.is_intrinsic_tag_name
resolve = _scoping.resolve
to_boundary_kind = _scoping.to_boundary_kind
to_message = _reporting.to_message
to_reference = _extraction.to_reference
to_visible_bindings = _scoping.to_visible_bindings
