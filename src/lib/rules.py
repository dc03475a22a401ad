"""
Rule engine for require statements

Evaluates the require layout policy against a StatementModel:

1. Isolated require lines of a kind are grouped into a block (a single
   isolated line of a kind is tolerated).
2. There are at most 2 require blocks, and an isolated line does not sit
   outside an existing block of its own kind.
3. The first block holds only direct dependencies and the second only
   indirect ones; a lone block is not mixed.

Rules run in order and evaluation stops at the first rule that reports
anything; each rule relies on the previous ones having passed.
"""

from typing import Callable, List

from ..models.requires import Consistency, Directive, Issue, StatementModel
from .log import LOG


MAX_REQUIRE_BLOCKS = 2


class RuleEngine:
    """
    Pure evaluator from StatementModel to an ordered list of Issues

    The engine keeps no state between calls, so one instance can be reused
    for any number of models.

    Example:
        >>> issues = RuleEngine().evaluate(StatementModel())
        >>> issues
        []
    """

    def rules_list(self) -> List[Callable[[StatementModel], List[Issue]]]:
        """Rules in evaluation order"""
        return [
            self.isolatedLines_check,
            self.blockCount_check,
            self.blockOrder_check,
        ]

    def evaluate(self, model: StatementModel) -> List[Issue]:
        """
        Evaluate all rules, stopping at the first one that reports issues

        Args:
            model: Extracted require statements

        Returns:
            Issues of the first failing rule, or an empty list if the
            manifest is compliant
        """
        for rule in self.rules_list():
            issues = rule(model)
            LOG(f"{rule.__name__}: {len(issues)} issue(s)", level=3)
            if issues:
                return issues
        return []

    def isolatedLines_check(self, model: StatementModel) -> List[Issue]:
        """
        Rule 1: require lines are grouped into blocks

        Direct and indirect lines are checked independently; the direct
        issue comes first.
        """
        issues: List[Issue] = []

        for kind, lines in (("direct", model.directLines), ("indirect", model.indirectLines)):
            if len(lines) > 1:
                issues.append(Issue(
                    position=lines[0].position,
                    text=(
                        f"{kind} require lines should be grouped into blocks "
                        f"but found {len(lines)} isolated require directives."
                    ),
                ))

        return issues

    def blockCount_check(self, model: StatementModel) -> List[Issue]:
        """
        Rule 2: at most 2 require blocks, no isolated line beside a block
        of its own kind

        Only the first isolated line of a kind is reported.
        """
        if len(model.blocks) > MAX_REQUIRE_BLOCKS:
            return [Issue(
                position=model.blocks[0].position,
                text=(
                    f"there should be a maximum of {MAX_REQUIRE_BLOCKS} require blocks "
                    f"but found {len(model.blocks)}."
                ),
            )]

        issues: List[Issue] = []

        # At most 2 blocks and at most 1 isolated line of each kind remain
        for block in model.blocks:
            if block.consistency is Consistency.ONLY_DIRECT and model.directLines:
                issues.append(self.insideBlock_issue(model.directLines[0]))
            elif block.consistency is Consistency.ONLY_INDIRECT and model.indirectLines:
                issues.append(self.insideBlock_issue(model.indirectLines[0]))

        return issues

    def blockOrder_check(self, model: StatementModel) -> List[Issue]:
        """
        Rule 3: first block direct only, second block indirect only; a lone
        block must not be mixed
        """
        issues: List[Issue] = []
        blocks = model.blocks

        if len(blocks) > 1:
            if blocks[0].consistency is not Consistency.ONLY_DIRECT:
                issues.append(Issue(
                    position=blocks[0].position,
                    text="first require block should only contain direct dependencies.",
                ))
            if blocks[1].consistency is not Consistency.ONLY_INDIRECT:
                issues.append(Issue(
                    position=blocks[1].position,
                    text="second require block should only contain indirect dependencies.",
                ))
        elif len(blocks) == 1 and blocks[0].consistency is Consistency.MIXED:
            issues.append(Issue(
                position=blocks[0].position,
                text="require block should not contain mixed dependencies.",
            ))

        return issues

    @staticmethod
    def insideBlock_issue(directive: Directive) -> Issue:
        return Issue(
            position=directive.position,
            text=f'require directive "{directive.name} {directive.version}" should be inside block.',
        )
