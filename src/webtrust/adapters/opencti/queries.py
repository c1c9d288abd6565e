"""GraphQL documents sent to the OpenCTI API."""

from __future__ import annotations

from typing import Final

_IDENTITY_FIELDS: Final = """
    createdBy {
        id
        standard_id
        name
    }
"""

OBSERVABLE_FIELDS: Final = f"""
    id
    standard_id
    entity_type
    observable_value
    {_IDENTITY_FIELDS}
    objectLabel {{
        id
        standard_id
        value
    }}
"""

INDICATOR_FIELDS: Final = f"""
    id
    standard_id
    pattern
    revoked
    x_opencti_score
    valid_from
    valid_until
    {_IDENTITY_FIELDS}
"""

GET_OBSERVABLE: Final = f"""
query WebTrustObservable($id: String!) {{
    stixCyberObservable(id: $id) {{
        {OBSERVABLE_FIELDS}
    }}
}}
"""

GET_INDICATOR: Final = f"""
query WebTrustIndicator($id: String!) {{
    indicator(id: $id) {{
        {INDICATOR_FIELDS}
    }}
}}
"""

ADD_OBSERVABLE: Final = f"""
mutation WebTrustObservableAdd(
    $type: String!,
    $createdBy: String,
    $objectMarking: [String],
    $objectLabel: [String],
    $DomainName: DomainNameAddInput,
    $IPv4Addr: IPv4AddrAddInput,
    $IPv6Addr: IPv6AddrAddInput,
    $Url: UrlAddInput
) {{
    stixCyberObservableAdd(
        type: $type,
        createdBy: $createdBy,
        objectMarking: $objectMarking,
        objectLabel: $objectLabel,
        DomainName: $DomainName,
        IPv4Addr: $IPv4Addr,
        IPv6Addr: $IPv6Addr,
        Url: $Url
    ) {{
        {OBSERVABLE_FIELDS}
    }}
}}
"""

PATCH_OBSERVABLE: Final = f"""
mutation WebTrustObservablePatch($id: ID!, $input: [EditInput]!) {{
    stixCyberObservableEdit(id: $id) {{
        fieldPatch(input: $input) {{
            {OBSERVABLE_FIELDS}
        }}
    }}
}}
"""

ADD_INDICATOR: Final = f"""
mutation WebTrustIndicatorAdd($input: IndicatorAddInput!) {{
    indicatorAdd(input: $input) {{
        {INDICATOR_FIELDS}
    }}
}}
"""

PATCH_INDICATOR: Final = f"""
mutation WebTrustIndicatorPatch($id: ID!, $input: [EditInput]!) {{
    indicatorFieldPatch(id: $id, input: $input) {{
        {INDICATOR_FIELDS}
    }}
}}
"""

ADD_RELATIONSHIP: Final = """
mutation WebTrustRelationshipAdd($input: StixCoreRelationshipAddInput!) {
    stixCoreRelationshipAdd(input: $input) {
        id
        standard_id
    }
}
"""
