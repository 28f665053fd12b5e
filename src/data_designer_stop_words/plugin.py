from data_designer.plugins.plugin import Plugin, PluginType

stop_words_plugin = Plugin(
    config_qualified_name="data_designer_stop_words.config.StopWordsColumnConfig",
    impl_qualified_name="data_designer_stop_words.generator.StopWordsColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
