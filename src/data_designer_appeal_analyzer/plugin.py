from data_designer.plugins.plugin import Plugin, PluginType

appeal_quality_plugin = Plugin(
    config_qualified_name="data_designer_appeal_analyzer.config.AppealQualityColumnConfig",
    impl_qualified_name="data_designer_appeal_analyzer.generator.AppealQualityColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
