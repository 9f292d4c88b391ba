"""Tests for the behavioral pattern demos."""

import pytest

from lifetime.core.pattern_system import DemoConfig
from lifetime.patterns.chain_of_responsibility import ChainOfResponsibilityDemo
from lifetime.patterns.chain_of_responsibility.approvers import (
    Director,
    President,
    Purchase,
    VicePresident,
)
from lifetime.patterns.command import CommandDemo
from lifetime.patterns.command.calculator import Calculator, User, inverse_operator
from lifetime.patterns.interpreter import InterpreterDemo
from lifetime.patterns.interpreter.roman import decode
from lifetime.patterns.iterator import IteratorDemo
from lifetime.patterns.iterator.collection import Collection, Item
from lifetime.patterns.mediator import MediatorDemo
from lifetime.patterns.mediator.chatroom import Beatle, Chatroom, NonBeatle
from lifetime.patterns.memento import MementoDemo
from lifetime.patterns.memento.prospect import ProspectMemory, SalesProspect
from lifetime.patterns.observer import ObserverDemo
from lifetime.patterns.observer.stock import IBM, Investor
from lifetime.patterns.state import StateDemo
from lifetime.patterns.state.account import Account, GoldState, RedState, SilverState
from lifetime.patterns.strategy import StrategyDemo
from lifetime.patterns.strategy.sorting import (
    MergeSort,
    QuickSort,
    ShellSort,
    SortedList,
    get_strategy,
)
from lifetime.patterns.visitor import VisitorDemo
from lifetime.patterns.visitor.employees import (
    Clerk,
    Employees,
    IncomeVisitor,
    VacationVisitor,
)


@pytest.fixture
def approvers():
    """Director -> VicePresident -> President."""
    director, vice_president, president = Director(), VicePresident(), President()
    director.set_successor(vice_president).set_successor(president)
    return director, vice_president, president


class TestChainOfResponsibility:
    """Tests for purchase approval."""

    def test_director_approves_small_purchase(self, approvers, capsys):
        director = approvers[0]
        assert director.process_request(Purchase(1, 350.0, "Assets")) is director
        assert capsys.readouterr().out == "Director approved request# 1\n"

    def test_limits_are_exclusive(self, approvers, capsys):
        director, vice_president, _ = approvers
        assert director.process_request(Purchase(2, 10000.0, "Desk")) is vice_president

    def test_president_approves(self, approvers, capsys):
        director, _, president = approvers
        assert director.process_request(Purchase(3, 32590.10, "Project X")) is president
        assert capsys.readouterr().out == "President approved request# 3\n"

    def test_executive_meeting(self, approvers, capsys):
        director = approvers[0]
        assert director.process_request(Purchase(4, 122100.0, "Project Y")) is None
        assert capsys.readouterr().out == "Request# 4 requires an executive meeting!\n"

    def test_end_of_chain_without_escalation(self, capsys):
        """A non-president at the end of the chain drops the request silently."""
        assert Director().process_request(Purchase(5, 50000.0, "Car")) is None
        assert capsys.readouterr().out == ""

    def test_output(self, capsys):
        ChainOfResponsibilityDemo().compute()
        assert capsys.readouterr().out == (
            "Director approved request# 2034\n"
            "President approved request# 2035\n"
            "Request# 2036 requires an executive meeting!\n"
        )


class TestCommand:
    """Tests for the undoable calculator."""

    def test_inverse_operator(self):
        assert inverse_operator("+") == "-"
        assert inverse_operator("-") == "+"
        assert inverse_operator("*") == "/"
        assert inverse_operator("/") == "*"

    def test_inverse_of_invalid_operator(self):
        with pytest.raises(ValueError):
            inverse_operator("%")

    def test_invalid_operation(self, capsys):
        calculator = Calculator()
        with pytest.raises(ValueError):
            calculator.operation("^", 2)
        assert calculator.current == 0

    def test_integer_division(self, capsys):
        calculator = Calculator()
        calculator.operation("+", 7)
        assert calculator.operation("/", 2) == 3

    def test_division_truncates_toward_zero(self, capsys):
        user = User()
        user.compute("-", 7)
        user.compute("/", 2)
        assert user.calculator.current == -3

        user.undo(1)
        assert user.calculator.current == -6

    def test_undo_and_redo(self, capsys):
        user = User()
        user.compute("+", 100)
        user.compute("-", 50)
        user.compute("*", 10)
        user.compute("/", 2)
        assert user.calculator.current == 250

        user.undo(4)
        assert user.calculator.current == 0

        user.redo(3)
        assert user.calculator.current == 500

    def test_undo_beyond_history_is_ignored(self, capsys):
        user = User()
        user.compute("+", 5)
        user.undo(3)
        assert user.calculator.current == 0
        user.redo(5)
        assert user.calculator.current == 5

    def test_new_command_discards_redo_history(self, capsys):
        user = User()
        user.compute("+", 10)
        user.compute("+", 20)
        user.undo(1)
        user.compute("*", 3)
        assert user.history_size == 2

        user.redo(1)
        assert user.calculator.current == 30

    def test_output(self, capsys):
        user = CommandDemo().compute()
        assert user.calculator.current == 500
        assert capsys.readouterr().out == (
            "Current value = 100 (following + 100)\n"
            "Current value =  50 (following - 50)\n"
            "Current value = 500 (following * 10)\n"
            "Current value = 250 (following / 2)\n"
            "\n---- Undo 4 levels \n"
            "Current value = 500 (following * 2)\n"
            "Current value =  50 (following / 10)\n"
            "Current value = 100 (following + 50)\n"
            "Current value =   0 (following - 100)\n"
            "\n---- Redo 3 levels \n"
            "Current value = 100 (following + 100)\n"
            "Current value =  50 (following - 50)\n"
            "Current value = 500 (following * 10)\n"
        )


class TestInterpreter:
    """Tests for Roman numeral decoding."""

    @pytest.mark.parametrize("roman, value", [
        ("MCMXXVIII", 1928),
        ("MMXXIV", 2024),
        ("XLII", 42),
        ("IV", 4),
        ("IX", 9),
        ("XC", 90),
        ("CDXLIV", 444),
        ("MMMCMXCIX", 3999),
        ("", 0),
    ])
    def test_decode(self, roman, value):
        assert decode(roman) == value

    @pytest.mark.parametrize("roman", ["ABC", "VX", "IIV", "mcm"])
    def test_decode_invalid(self, roman):
        with pytest.raises(ValueError):
            decode(roman)

    def test_output(self, capsys):
        InterpreterDemo().compute()
        assert capsys.readouterr().out == "MCMXXVIII = 1928\n"

    def test_configured_numerals(self, capsys):
        InterpreterDemo(DemoConfig(config={"numerals": ["XIV", "MM"]})).compute()
        assert capsys.readouterr().out == "XIV = 14\nMM = 2000\n"


def make_collection(size):
    collection = Collection()
    for i in range(size):
        collection.add(Item(f"Item {i}"))
    return collection


class TestIterator:
    """Tests for the stepping iterator."""

    def test_explicit_walk(self):
        iterator = make_collection(5).create_iterator(step=2)
        names = []
        item = iterator.first()
        while not iterator.is_done:
            names.append(item.name)
            item = iterator.next()
        assert names == ["Item 0", "Item 2", "Item 4"]
        assert iterator.current_item is None

    def test_python_iteration(self):
        assert [item.name for item in make_collection(3)] == ["Item 0", "Item 1", "Item 2"]
        stepped = make_collection(7).create_iterator(step=3)
        assert [item.name for item in stepped] == ["Item 0", "Item 3", "Item 6"]

    def test_empty_collection(self):
        iterator = Collection().create_iterator()
        assert iterator.first() is None
        assert iterator.is_done
        assert list(Collection()) == []

    def test_invalid_step(self):
        with pytest.raises(ValueError):
            make_collection(3).create_iterator(step=0)

    def test_output(self, capsys):
        IteratorDemo().compute()
        assert capsys.readouterr().out == (
            "Iterating over collection:\n"
            "Item 0\nItem 2\nItem 4\nItem 6\nItem 8\n"
        )


class TestMediator:
    """Tests for the chatroom."""

    def test_message_is_routed(self, capsys):
        chatroom = Chatroom()
        paul, yoko = Beatle("Paul"), NonBeatle("Yoko")
        chatroom.register(paul)
        chatroom.register(yoko)

        paul.send("Yoko", "Hello")
        yoko.send("Paul", "Hi")
        assert capsys.readouterr().out == (
            "To a non-Beatle: Paul to Yoko: 'Hello'\n"
            "To a Beatle: Yoko to Paul: 'Hi'\n"
        )

    def test_unknown_receiver_is_dropped(self, capsys):
        chatroom = Chatroom()
        paul = Beatle("Paul")
        chatroom.register(paul)
        paul.send("Mick", "Hello?")
        assert capsys.readouterr().out == ""

    def test_send_without_chatroom(self):
        with pytest.raises(RuntimeError):
            Beatle("Pete").send("John", "Hi")

    def test_output(self, capsys):
        MediatorDemo().compute()
        assert capsys.readouterr().out == (
            "To a Beatle: Yoko to John: 'Hi John!'\n"
            "To a Beatle: Paul to Ringo: 'All you need is love'\n"
            "To a Beatle: Ringo to George: 'My sweet Lord'\n"
            "To a Beatle: Paul to John: 'Can't buy me love'\n"
            "To a non-Beatle: John to Yoko: 'My sweet love'\n"
        )


class TestMemento:
    """Tests for saving and restoring a prospect."""

    def test_restore(self, capsys):
        prospect = SalesProspect()
        prospect.name = "A"
        prospect.phone = "1"
        prospect.budget = 10.0

        memory = ProspectMemory()
        memory.memento = prospect.save_memento()

        prospect.name = "B"
        prospect.budget = 20.0
        prospect.restore_memento(memory.memento)

        assert (prospect.name, prospect.phone, prospect.budget) == ("A", "1", 10.0)

    def test_memento_is_immutable(self, capsys):
        memento = SalesProspect().save_memento()
        with pytest.raises(AttributeError):
            memento.name = "changed"

    def test_budget_echo(self, capsys):
        prospect = SalesProspect()
        prospect.budget = 1000000.0
        prospect.budget = 1234.5
        assert capsys.readouterr().out == "Budget: 1000000\nBudget: 1234.5\n"

    def test_output(self, capsys):
        prospect = MementoDemo().compute()
        assert prospect.name == "Noel van Halen"
        assert prospect.budget == 25000.0

        out = capsys.readouterr().out
        assert out.startswith("Name:  Noel van Halen\nPhone: (412) 256-0990\nBudget: 25000\n")
        assert "\nSaving state --\n\n" in out
        assert "Name:  Leo Welch\n" in out
        assert out.endswith(
            "\nRestoring state --\n\n"
            "Name:  Noel van Halen\nPhone: (412) 256-0990\nBudget: 25000\n"
        )


class TestObserver:
    """Tests for stock notifications."""

    def test_notifies_attached_investors(self, capsys):
        ibm = IBM(100.0)
        sorros = Investor("Sorros")
        ibm.attach(sorros)
        ibm.price = 101.5
        assert sorros.stock is ibm
        assert capsys.readouterr().out == "Notified Sorros of IBM's change to $101.50\n\n"

    def test_unchanged_price_does_not_notify(self, capsys):
        ibm = IBM(100.0)
        ibm.attach(Investor("Sorros"))
        ibm.price = 100.0
        assert capsys.readouterr().out == ""

    def test_detach(self, capsys):
        ibm = IBM(100.0)
        investor = Investor("Sorros")
        ibm.attach(investor)
        ibm.detach(investor)
        ibm.price = 99.0
        assert investor.stock is None

    def test_output(self, capsys):
        ObserverDemo().compute()
        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == [
            "Notified Sorros of IBM's change to $120.10",
            "Notified Berkshire of IBM's change to $120.10",
            "",
        ]
        assert "Notified Berkshire of IBM's change to $121.00" in lines
        assert lines[-2] == "Notified Berkshire of IBM's change to $120.75"


class TestState:
    """Tests for the account state machine."""

    def test_starts_silver(self):
        account = Account("Test")
        assert isinstance(account.state, SilverState)
        assert account.balance == 0.0

    def test_gold_pays_interest(self, capsys):
        account = Account("Test")
        account.deposit(2000.0)
        assert isinstance(account.state, GoldState)
        account.pay_interest()
        assert account.balance == pytest.approx(2100.0)

    def test_silver_pays_no_interest(self, capsys):
        account = Account("Test")
        account.deposit(500.0)
        account.pay_interest()
        assert account.balance == 500.0

    def test_red_refuses_withdrawals(self, capsys):
        account = Account("Test")
        account.withdraw(50.0)
        assert isinstance(account.state, RedState)
        capsys.readouterr()

        account.withdraw(10.0)
        assert account.balance == -50.0
        assert capsys.readouterr().out.startswith("No funds available for withdrawal!\n")

    def test_red_recovers_on_deposit(self, capsys):
        account = Account("Test")
        account.withdraw(50.0)
        account.deposit(100.0)
        assert isinstance(account.state, SilverState)
        assert account.balance == 50.0

    def test_output(self, capsys):
        account = StateDemo().compute()
        assert isinstance(account.state, RedState)
        assert account.balance == pytest.approx(-582.5)

        out = capsys.readouterr().out
        assert out.startswith(
            "Deposited $500.00 --- \n"
            " Balance = $500.00\n"
            " Status  = SilverState\n\n"
        )
        assert "Deposited $550.00 --- \n Balance = $1,350.00\n Status  = GoldState\n" in out
        assert "Interest Paid --- \n Balance = $1,417.50\n Status  = GoldState\n" in out
        assert "Withdrew $2,000.00 --- \n Balance = -$582.50\n Status  = RedState\n" in out
        assert out.endswith(
            "No funds available for withdrawal!\n"
            "Withdrew $1,100.00 --- \n"
            " Balance = -$582.50\n"
            " Status  = RedState\n\n"
        )


NAMES = ["Samuel", "Jimmy", "Sandra", "Vivek", "Anna", "Jimmy", "Bob"]


class TestStrategy:
    """Tests for the sort strategies."""

    @pytest.mark.parametrize("strategy", [QuickSort(), ShellSort(), MergeSort()])
    def test_sorts(self, strategy):
        items = list(NAMES)
        strategy.sort(items)
        assert items == sorted(NAMES)

    @pytest.mark.parametrize("strategy", [QuickSort(), ShellSort(), MergeSort()])
    def test_small_inputs(self, strategy):
        empty, single = [], ["A"]
        strategy.sort(empty)
        strategy.sort(single)
        assert empty == []
        assert single == ["A"]

    def test_get_strategy(self):
        assert isinstance(get_strategy("quick"), QuickSort)
        assert isinstance(get_strategy("Shell"), ShellSort)
        with pytest.raises(ValueError):
            get_strategy("bubble")

    def test_sort_without_strategy(self):
        with pytest.raises(RuntimeError):
            SortedList().sort()

    def test_sorted_list_output(self, capsys):
        names = SortedList()
        names.add("b")
        names.add("a")
        names.set_sort_strategy(MergeSort())
        names.sort()
        assert names.items == ["a", "b"]
        assert capsys.readouterr().out == "Merge sorted list \n\ta\n\tb\n\n"

    def test_output(self, capsys):
        StrategyDemo().compute()
        out = capsys.readouterr().out
        block = "\tAnna\n\tJimmy\n\tSamuel\n\tSandra\n\tVivek\n\n"
        assert out == (
            "Quick sorted list \n" + block
            + "Shell sorted list \n" + block
            + "Merge sorted list \n" + block
        )


class TestVisitor:
    """Tests for HR visitors."""

    def test_income_visitor(self, capsys):
        clerk = Clerk()
        clerk.accept(IncomeVisitor())
        assert clerk.income == pytest.approx(27500.0)
        assert capsys.readouterr().out == "Clerk Hank's new income: $27,500.00\n"

    def test_vacation_visitor(self, capsys):
        clerk = Clerk()
        clerk.accept(VacationVisitor())
        assert clerk.vacation_days == 17

    def test_detach(self, capsys):
        employees = Employees()
        clerk = Clerk()
        employees.attach(clerk)
        employees.detach(clerk)
        employees.accept(VacationVisitor())
        assert clerk.vacation_days == 14

    def test_output(self, capsys):
        employees = VisitorDemo().compute()
        assert [e.vacation_days for e in employees] == [17, 19, 24]
        assert capsys.readouterr().out == (
            "Clerk Hank's new income: $27,500.00\n"
            "Director Elly's new income: $38,500.00\n"
            "President Dick's new income: $49,500.00\n"
            "\n"
            "Clerk Hank's new vacation days: 17\n"
            "Director Elly's new vacation days: 19\n"
            "President Dick's new vacation days: 24\n"
            "\n"
        )
