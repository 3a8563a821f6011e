"""
Support tickets escalate from basic support up to a manager.
"""

from typing import Optional


class SupportHandler:
    _next_handler: Optional["SupportHandler"] = None

    def set_next(self, handler: "SupportHandler") -> "SupportHandler":
        self._next_handler = handler
        return handler

    def handle_request(self, issue: str) -> bool:
        """Returns True when some level of the chain resolved the issue"""
        if self._next_handler:
            return self._next_handler.handle_request(issue)
        print("SupportHandler: No further support available.")
        return False


class BasicSupportHandler(SupportHandler):
    def handle_request(self, issue: str) -> bool:
        if issue == "password_reset":
            print("BasicSupportHandler: Resolved the issue (Password reset).")
            return True
        print("BasicSupportHandler: Escalating the issue to the next level.")
        return super().handle_request(issue)


class TechnicalSupportHandler(SupportHandler):
    def handle_request(self, issue: str) -> bool:
        if issue == "software_bug":
            print("TechnicalSupportHandler: Resolved the issue (Software bug fix).")
            return True
        print("TechnicalSupportHandler: Escalating the issue to the next level.")
        return super().handle_request(issue)


class ManagerSupportHandler(SupportHandler):
    # Last level: never escalates further
    def handle_request(self, issue: str) -> bool:
        if issue == "billing_issue":
            print("ManagerSupportHandler: Resolved the issue (Billing issue).")
            return True
        print(
            "ManagerSupportHandler: Unable to resolve the issue. "
            "Please contact higher management."
        )
        return False


def build_support_chain() -> SupportHandler:
    basic = BasicSupportHandler()
    basic.set_next(TechnicalSupportHandler()).set_next(ManagerSupportHandler())
    return basic


def main() -> None:
    support = build_support_chain()
    cases = [
        ("Password reset request", "password_reset"),
        ("Software bug report", "software_bug"),
        ("Billing issue", "billing_issue"),
        ("Unknown issue", "unknown_issue"),
    ]
    for number, (label, issue) in enumerate(cases, start=1):
        if number > 1:
            print()
        print(f"Case {number}: {label}:")
        support.handle_request(issue)


if __name__ == "__main__":
    main()
