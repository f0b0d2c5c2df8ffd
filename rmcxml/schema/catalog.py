"""Static schema tables for RMC resource catalog documents."""

from __future__ import annotations

from .registry import ROOT, ElementDocumentation, SchemaRegistry

_OMEGA_SIGMA = ("OmegaA", "SigmaDiag")
_ACTION_CHILDREN = ("DeltaAction", "InsertActions", "ActionCatalog", "RandomElement3")

HIERARCHY = {
    ROOT: ("EtaRsccat",),
    "EtaRsccat": ("ZetaMessage",),
    "ZetaMessage": ("BetaEntry",),
    "BetaEntry": ("OmegaA", "SigmaDiag", "LambdaActions", "RandomElement1"),
    "LambdaActions": _ACTION_CHILDREN,
    "ThetaActions": _ACTION_CHILDREN,
    "DeltaAction": ("EpsilonCmd", "ZetaParams", "EtaCargs", "ThetaTxt", "IotaMsg"),
    "ZetaParams": ("BetaPrm",),
    "BetaPrm": ("GammaObj", "DeltaName", "EpsilonVal"),
    "EtaCargs": ("PhiCarg",),
    "PhiCarg": ("PsiTxtPrompt", "ChiDefCmd", "OmegaEnumCmd", "SigmaEnum", "RandomElement2"),
    "IotaMsg": ("BetaArg",),
    "BetaArg": ("OmegaA",),
    "InsertActions": ("BetaArg",),
    "ActionCatalog": ("BetaArg",),
    "RhoCommandType": _OMEGA_SIGMA,
    "AlphaActionTxtType": _OMEGA_SIGMA,
    "EpsilonCmd": _OMEGA_SIGMA,
    "ChiDefCmd": _OMEGA_SIGMA,
    "OmegaEnumCmd": _OMEGA_SIGMA,
    "GammaObj": _OMEGA_SIGMA,
    "ThetaTxt": _OMEGA_SIGMA,
}

_ACTION_CONTAINER_ATTRIBUTES = ("XiExFixThese", "KappaEnabled", "MuOrder")

ATTRIBUTES = {
    "EtaRsccat": ("TauVersion", "UpsilonProduct", "ChiLocale", "OmegaDecorateCxxNames"),
    "BetaEntry": ("PsiKey", "PhiTranslate", "MuCdata", "NuNote", "XiContext", "RandomAttr1"),
    "OmegaA": ("RhoHref", "SigmaFileName", "TauStyle", "UpsilonId", "RandomAttr2"),
    "SigmaDiag": ("PhiObjP", "ChiObjU", "PsiObjN"),
    "DeltaAction": ("KappaEnabled", "LambdaId", "MuType", "NuBtn", "XiRetvalue"),
    "LambdaActions": _ACTION_CONTAINER_ATTRIBUTES,
    "ThetaActions": _ACTION_CONTAINER_ATTRIBUTES,
    "PhiCarg": ("TauName", "UpsilonType", "PhiTranslate"),
    "OmegaMsgActType": ("GammaId",),
    "EpsilonSomeType": ("KappaEnabled", "LambdaFromId", "MuActionableIdentifiers"),
    "ZetaActionCatalogIndirectType": ("KappaEnabled", "LambdaFromId", "MuIds", "NuId"),
}

REQUIRED_ATTRIBUTES = {
    "BetaEntry": ("PsiKey",),
    "EtaRsccat": ("UpsilonProduct",),
    "OmegaA": ("RhoHref",),
    "SigmaDiag": ("PhiObjP", "ChiObjU"),
    "DeltaAction": ("MuType",),
}

ATTRIBUTE_ENUMS = {
    "XiContext": ("error", "warning", "diagnostic", "textstring", "paramobject"),
    "UpsilonType": ("text", "menu"),
    "MuType": ("fixthis", "suggest", "suppress", "help", "doc"),
    "NuBtn": ("none", "fix", "resolve", "apply", "open", "suppress", "disable"),
    "XiRetvalue": ("false", "no", "true", "yes"),
    "XiExFixThese": ("yes", "no"),
    "MuOrder": ("block",),
}

IDENTIFIER_ATTRIBUTES = ("PsiKey", "UpsilonProduct")

BOOLEAN_ATTRIBUTES = ("PhiTranslate", "MuCdata", "KappaEnabled", "OmegaDecorateCxxNames")

KNOWN_ELEMENTS = (
    "EtaRsccat", "ZetaMessage", "BetaEntry", "LambdaActions", "ThetaActions",
    "DeltaAction", "OmegaA", "SigmaDiag", "EpsilonCmd", "ZetaParams",
    "BetaPrm", "GammaObj", "DeltaName", "EpsilonVal", "EtaCargs",
    "PhiCarg", "PsiTxtPrompt", "ChiDefCmd", "OmegaEnumCmd", "SigmaEnum",
    "ThetaTxt", "IotaMsg", "BetaArg", "InsertActions", "ActionCatalog",
    "RandomElement1", "RandomElement2", "RandomElement3", "GammaParamsType",
    "AlphaActionTxtType", "RhoCommandType", "TauPromptType", "UpsilonUserMsgType",
    "PhiCargType", "ChiCargsType", "PsiAMsgArgumentType", "OmegaMsgActType",
    "BetaParamType", "EpsilonSomeType", "ZetaActionCatalogIndirectType",
    "PiIntroType", "GammaHLType", "DeltaDType",
)

_ACTION_CONTAINER_DOCS = {
    "XiExFixThese": "Whether fix-it actions are mutually exclusive",
    "KappaEnabled": "Whether actions are enabled",
    "MuOrder": "Ordering strategy for actions",
}

DOCUMENTATION = {
    "EtaRsccat": ElementDocumentation(
        description="Root element for RMC resource catalog",
        details="Contains version information and message definitions for the resource catalog.",
        attributes={
            "TauVersion": "Version number of the resource catalog",
            "UpsilonProduct": "Product identifier (required)",
            "ChiLocale": "Locale specification for internationalization",
            "OmegaDecorateCxxNames": "Whether to decorate C++ names",
        },
    ),
    "BetaEntry": ElementDocumentation(
        description="Individual message entry with unique key",
        details=(
            "Represents a single message or diagnostic entry in the catalog. "
            "Each entry must have a unique PsiKey."
        ),
        attributes={
            "PsiKey": "Unique identifier for this message entry (required)",
            "PhiTranslate": "Whether this entry should be translated",
            "MuCdata": "Whether content should be treated as CDATA",
            "NuNote": "Additional notes for translators",
            "XiContext": "Context type: error, warning, diagnostic, textstring, paramobject",
            "RandomAttr1": "Optional integer attribute",
        },
    ),
    "DeltaAction": ElementDocumentation(
        description="Action definition for user interactions",
        details="Defines an action that can be performed by the user, such as fix-it suggestions or help actions.",
        attributes={
            "MuType": "Action type: fixthis, suggest, suppress, help, doc (required)",
            "LambdaId": "Unique identifier for this action",
            "KappaEnabled": "Whether this action is enabled",
            "NuBtn": "Button type: none, fix, resolve, apply, open, suppress, disable",
            "XiRetvalue": "Return value: true, false, yes, no",
        },
    ),
    "OmegaA": ElementDocumentation(
        description="Hyperlink to Custom objects",
        details="Creates a link to a Custom object or model element.",
        attributes={
            "RhoHref": "Target reference for the hyperlink (required)",
            "SigmaFileName": "Associated file name",
            "TauStyle": "Display style for the link",
            "UpsilonId": "Unique identifier for the link",
            "RandomAttr2": "Optional string attribute",
        },
    ),
    "SigmaDiag": ElementDocumentation(
        description="Diagnostic link to Custom UI",
        details="Creates a link to Custom UI elements for diagnostic purposes.",
        attributes={
            "PhiObjP": "Object paramobject reference (required)",
            "ChiObjU": "Object UI reference (required)",
            "PsiObjN": "Object name for display",
        },
    ),
    "LambdaActions": ElementDocumentation(
        description="Container for message actions",
        details="Groups related actions that can be performed on a message entry.",
        attributes=_ACTION_CONTAINER_DOCS,
    ),
    "ZetaMessage": ElementDocumentation(
        description="Container for message entries",
        details="Groups all message entries in the resource catalog.",
    ),
    "ThetaActions": ElementDocumentation(
        description="Advanced action container",
        details="Container for complex action definitions with additional features.",
        attributes=_ACTION_CONTAINER_DOCS,
    ),
    "PhiCarg": ElementDocumentation(
        description="Command argument definition",
        details="Declares one argument of a command together with how the user supplies it.",
        attributes={
            "TauName": "Argument name",
            "UpsilonType": "Input style: text, menu",
            "PhiTranslate": "Whether the argument prompt should be translated",
        },
    ),
}

RMC_SCHEMA = SchemaRegistry(
    hierarchy=HIERARCHY,
    attributes=ATTRIBUTES,
    required=REQUIRED_ATTRIBUTES,
    enums=ATTRIBUTE_ENUMS,
    known_elements=KNOWN_ELEMENTS,
    pattern_attributes=IDENTIFIER_ATTRIBUTES,
    boolean_attributes=BOOLEAN_ATTRIBUTES,
    documentation=DOCUMENTATION,
)

__all__ = ["RMC_SCHEMA"]
