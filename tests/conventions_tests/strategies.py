from tests import strategies

component_names = strategies.component_names
intrinsic_names = strategies.intrinsic_names
