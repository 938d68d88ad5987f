import logging

from dummyjson_bdd.api.executor import CallAnApi
from dummyjson_bdd.config import load_settings
from dummyjson_bdd.export.result_sink import ResultSink, ScenarioReport
from dummyjson_bdd.screenplay.actor import Stage


def before_all(context):
    context.settings = load_settings(userdata=context.config.userdata)

    logging.basicConfig(
        level=context.settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    context.logger = logging.getLogger("dummyjson_bdd.features")
    context.logger.info("Running against %s", context.settings.base_url)
    context.reports = []


def before_scenario(context, scenario):
    """
    Fresh stage per scenario. In @api scenarios every actor that walks on
    stage can call the API; the default actor starts in the spotlight.
    """
    settings = context.settings
    context.logger.info("Scenario: %s", scenario.name)

    def call_an_api(actor):
        if "api" in scenario.effective_tags:
            actor.who_can(CallAnApi.at(
                settings.base_url,
                timeout=settings.timeout,
                verify_tls=settings.verify_tls,
            ))

    context.stage = Stage(cast=call_an_api)
    context.stage.actor(settings.actor_name)


def after_scenario(context, scenario):
    status = getattr(scenario.status, "name", str(scenario.status))
    feature = getattr(context.feature, "filename", "") or ""
    context.reports.append(ScenarioReport.from_stage(scenario.name, feature, status, context.stage))
    context.stage.close()
    context.logger.info("Scenario '%s' %s", scenario.name, status.upper())


def after_all(context):
    settings = context.settings
    if settings.report_json or settings.report_console:
        ResultSink().write(context.reports, settings)
