"""Thread safety tests for shared formatters.

Formatter and TreePrinter hold only immutable configuration. These tests run
differently configured formatters side by side and check that no output
leaks between configurations.
"""

from concurrent.futures import ThreadPoolExecutor

from alinea import BracketPlacement, Formatter, FormatConfig, format_markup

SOURCE = '<section><img src="a.png" alt="A picture" width="10" /><p>text</p></section>'

CONFIGS = [
    FormatConfig(),
    FormatConfig(align_attributes=False),
    FormatConfig(indent_width=4),
    FormatConfig(bracket_placement=BracketPlacement.ALIGNED),
    FormatConfig(bracket_placement=BracketPlacement.HARDLINE, print_width=40),
]


class TestConcurrentFormatting:
    def test_shared_formatter(self) -> None:
        fmt = Formatter()
        expected = fmt(SOURCE)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: fmt(SOURCE), range(200)))
        assert all(result == expected for result in results)

    def test_configs_do_not_interfere(self) -> None:
        expected = {config: format_markup(SOURCE, config) for config in CONFIGS}
        jobs = CONFIGS * 40

        def run(config: FormatConfig) -> tuple[FormatConfig, str]:
            return config, Formatter(config)(SOURCE)

        with ThreadPoolExecutor(max_workers=8) as pool:
            for config, output in pool.map(run, jobs):
                assert output == expected[config]

    def test_configs_produce_distinct_output(self) -> None:
        outputs = {format_markup(SOURCE, config) for config in CONFIGS}
        assert len(outputs) == len(CONFIGS)
